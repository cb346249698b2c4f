import pathlib
import operator
from concurrent.futures import ThreadPoolExecutor

import pytest

try:
    from yaml import CSafeLoader as SafeLoader, load
except ImportError:
    from yaml import SafeLoader, load  # type: ignore

from ua_classifier import (
    Browser,
    ClassificationResult,
    DeviceType,
    OperatingSystem,
    classify_user_agent,
)


FIXTURES_DIR = pathlib.Path(__file__).resolve().parent / "fixtures"

FIELDS = ("os", "browser", "device_type")
get_reference = operator.itemgetter(*FIELDS)


def load_test_cases(name: str) -> list:
    with (FIXTURES_DIR / name).open("rb") as f:
        contents = load(f, Loader=SafeLoader)
    return contents["test_cases"]


TEST_CASES = load_test_cases("test_user_agents.yaml")


@pytest.mark.parametrize(
    "test_case",
    TEST_CASES,
    ids=[case["user_agent_string"][:60] or "<empty>" for case in TEST_CASES],
)
def test_user_agents(test_case: dict) -> None:
    r = classify_user_agent(test_case["user_agent_string"])
    result = (r.os.name, r.browser.name, r.device_type.name)

    assert result == get_reference(test_case)


@pytest.mark.parametrize(
    "user_agent",
    [
        None,
        "",
        " ",
        "\x00\x01\x02",
        "𐏿",
        "Kİß",
        "((((;;;;))))" * 50,
        "A" * 100_000,
        "Mozilla/5.0 (" * 1_000,
    ],
)
def test_never_fails(user_agent) -> None:
    result = classify_user_agent(user_agent)

    assert isinstance(result, ClassificationResult)
    assert isinstance(result.os, OperatingSystem)
    assert isinstance(result.browser, Browser)
    assert isinstance(result.device_type, DeviceType)


def test_non_ascii_input_gets_labels() -> None:
    result = classify_user_agent("Mozilla/5.0 (\u017fymbian; K\u0130\u00df) \u017fafari/1.0")

    assert result == ClassificationResult(
        os=OperatingSystem.Symbian,
        browser=Browser.Safari,
        device_type=DeviceType.Mobile,
    )


def test_none_and_empty_are_unknown() -> None:
    expected = ClassificationResult(
        os=OperatingSystem.Unknown,
        browser=Browser.Unknown,
        device_type=DeviceType.Unknown,
    )

    assert classify_user_agent(None) == expected
    assert classify_user_agent("") == expected


def test_repeated_calls_are_identical() -> None:
    for case in TEST_CASES:
        ua = case["user_agent_string"]
        assert classify_user_agent(ua) == classify_user_agent(ua)


def test_concurrent_calls_match_sequential() -> None:
    user_agents = [case["user_agent_string"] for case in TEST_CASES] * 20
    expected = [classify_user_agent(ua) for ua in user_agents]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(classify_user_agent, user_agents))

    assert results == expected


def test_result_serializes_to_names() -> None:
    result = classify_user_agent(TEST_CASES[0]["user_agent_string"])

    assert result.model_dump(mode="json") == {
        "os": "Windows",
        "browser": "Chrome",
        "device_type": "Desktop",
    }


def test_result_deserializes_from_names() -> None:
    result = ClassificationResult.model_validate(
        {"os": "IOS", "browser": "Safari", "device_type": "Mobile"}
    )

    assert result.os is OperatingSystem.IOS
    assert result.browser is Browser.Safari
    assert result.device_type is DeviceType.Mobile


def test_result_is_immutable_and_hashable() -> None:
    result = classify_user_agent("Mozilla/5.0 (X11; Linux x86_64) Firefox/115.0")

    with pytest.raises(Exception):
        result.os = OperatingSystem.Windows

    assert len({result, classify_user_agent("Mozilla/5.0 (X11; Linux x86_64) Firefox/115.0")}) == 1
