# ua_classifier/classifier.py

from enum import Enum
from typing import Optional

from ua_classifier.categories import Browser, DeviceType, OperatingSystem
from ua_classifier.patterns import (
    BROWSER_TABLE,
    DESKTOP_FALLBACK_MARKERS,
    DEVICE_TABLE,
    OS_TABLE,
    PatternTable,
)
from ua_classifier.schemas import ClassificationResult


def match_table(table: PatternTable, user_agent: str) -> Enum:
    """
    Scan the specific group, then the generic group.

    A string match in a group ends the scan, even if the token has no
    category (it then resolves to the table's Unknown).
    """
    for group in table.groups:
        token = group.search(user_agent)
        if token is not None:
            return group.resolve(token, table.unknown)

    return table.unknown


def detect_os(user_agent: str) -> OperatingSystem:
    """Detect operating system family"""
    if not user_agent:
        return OperatingSystem.Unknown
    return match_table(OS_TABLE, user_agent)


def detect_browser(user_agent: str) -> Browser:
    """Detect client / browser family"""
    if not user_agent:
        return Browser.Unknown
    return match_table(BROWSER_TABLE, user_agent)


def detect_device(user_agent: str) -> DeviceType:
    """
    Detect device form factor.

    Falls back to Desktop when nothing matched but the raw string contains
    "Windows", "Macintosh" or "Linux" (exact case).
    """
    if not user_agent:
        return DeviceType.Unknown

    device_type = match_table(DEVICE_TABLE, user_agent)

    if device_type == DeviceType.Unknown:
        if any(marker in user_agent for marker in DESKTOP_FALLBACK_MARKERS):
            device_type = DeviceType.Desktop

    return device_type


def classify_user_agent(user_agent: Optional[str]) -> ClassificationResult:
    """
    Classify user agent string into OS, browser and device type.

    Never raises; unrecognised or empty input yields Unknown in each field.
    """
    user_agent = user_agent or ""

    return ClassificationResult(
        os=detect_os(user_agent),
        browser=detect_browser(user_agent),
        device_type=detect_device(user_agent),
    )
