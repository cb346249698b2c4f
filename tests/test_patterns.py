import dataclasses

import pytest

from ua_classifier.patterns import BROWSER_TABLE, DEVICE_TABLE, OS_TABLE

TABLES = {"os": OS_TABLE, "browser": BROWSER_TABLE, "device": DEVICE_TABLE}


@pytest.mark.parametrize("name", TABLES)
def test_every_token_has_a_category(name):
    table = TABLES[name]

    for group in table.groups:
        for token, category in group.pairs:
            assert token == token.lower()
            assert group.resolve(token, table.unknown) is category
            assert category is not table.unknown


@pytest.mark.parametrize("name", TABLES)
def test_every_token_matches_itself(name):
    table = TABLES[name]

    for group in table.groups:
        for token, _ in group.pairs:
            assert group.search(token.upper()) is not None


@pytest.mark.parametrize("name", TABLES)
def test_no_token_in_both_groups(name):
    table = TABLES[name]
    specific = {token for token, _ in table.specific.pairs}
    generic = {token for token, _ in table.generic.pairs}

    assert not specific & generic


def test_tables_are_read_only():
    with pytest.raises(dataclasses.FrozenInstanceError):
        OS_TABLE.specific = OS_TABLE.generic

    with pytest.raises(TypeError):
        OS_TABLE.generic.lookup["bsd"] = None


def test_special_characters_are_literal():
    assert OS_TABLE.specific.search("iPad; CPU OS 16_6") == "ipad; cpu os"
    assert BROWSER_TABLE.specific.search("Yahoo! Slurp") == "yahoo! slurp"
    assert BROWSER_TABLE.specific.search("Yahoo Slurp") is None
