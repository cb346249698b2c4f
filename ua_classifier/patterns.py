# ua_classifier/patterns.py

import re
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ua_classifier.categories import Browser, DeviceType, OperatingSystem

TokenPairs = Tuple[Tuple[str, Enum], ...]


@dataclass(frozen=True)
class TokenGroup:
    """
    Ordered (token, category) pairs compiled into one case-insensitive alternation.

    Leftmost match in the input wins; ties at the same position go to the
    token listed first.
    """
    pairs: TokenPairs
    pattern: re.Pattern = field(init=False, repr=False, compare=False)
    lookup: Mapping[str, Enum] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        # One group per token, so the match names its token directly
        alternation = "|".join(f"({re.escape(token)})" for token, _ in self.pairs)
        object.__setattr__(self, "pattern", re.compile(alternation, re.IGNORECASE))
        object.__setattr__(self, "lookup", MappingProxyType(dict(self.pairs)))

    def search(self, user_agent: str) -> Optional[str]:
        """Return the table token that matched, or None"""
        match = self.pattern.search(user_agent)
        if match is None:
            return None
        return self.pairs[match.lastindex - 1][0]

    def resolve(self, token: str, unknown: Enum) -> Enum:
        return self.lookup.get(token, unknown)


@dataclass(frozen=True)
class PatternTable:
    """Specific group first, generic group only as a fallback"""
    specific: TokenGroup
    generic: TokenGroup
    unknown: Enum

    @property
    def groups(self) -> Tuple[TokenGroup, TokenGroup]:
        return (self.specific, self.generic)


# Operating systems
OS_SPECIFIC: TokenPairs = (
    ("windows phone", OperatingSystem.WindowsPhone),
    ("mac os x", OperatingSystem.MacOS),
    ("iphone os", OperatingSystem.IOS),
    ("ipad; cpu os", OperatingSystem.IPadOS),
    ("android", OperatingSystem.Android),
    ("ubuntu", OperatingSystem.Ubuntu),
    ("fedora", OperatingSystem.Fedora),
    ("debian", OperatingSystem.Debian),
    ("cros", OperatingSystem.ChromeOS),
    ("crkey", OperatingSystem.ChromeOS),
    ("chrome os", OperatingSystem.ChromeOS),
    ("blackberry", OperatingSystem.BlackBerry),
    ("symbian", OperatingSystem.Symbian),
    ("webos", OperatingSystem.WebOS),
    ("bada", OperatingSystem.Bada),
    ("tizen", OperatingSystem.Tizen),
    ("nintendo", OperatingSystem.Nintendo),
    ("playstation", OperatingSystem.PlayStation),
    ("xbox", OperatingSystem.Xbox),
    ("wii", OperatingSystem.Wii),
    ("freebsd", OperatingSystem.FreeBSD),
    ("openbsd", OperatingSystem.OpenBSD),
    ("solaris", OperatingSystem.Solaris),
    ("aix", OperatingSystem.AIX),
    ("hp-ux", OperatingSystem.HPUX),
    ("harmonyos", OperatingSystem.HarmonyOS),
    ("kaios", OperatingSystem.KaiOS),
)

OS_GENERIC: TokenPairs = (
    ("windows", OperatingSystem.Windows),
    ("linux", OperatingSystem.Linux),
)

# Browsers - many of these embed "chrome" or "safari" too, so they go first
BROWSER_SPECIFIC: TokenPairs = (
    ("ucbrowser", Browser.UCBrowser),
    ("samsungbrowser", Browser.SamsungBrowser),
    ("oculusbrowser", Browser.OculusBrowser),
    ("ucweb", Browser.UCBrowser),
    ("crios", Browser.Chrome),
    ("headlesschrome", Browser.Chrome),
    ("mobile safari", Browser.Safari),
    ("fxios", Browser.Firefox),
    ("edge", Browser.Edge),
    ("edg", Browser.Edge),
    ("edga", Browser.Edge),
    ("edgios", Browser.Edge),
    ("msie", Browser.InternetExplorer),
    ("trident", Browser.InternetExplorer),
    ("opera", Browser.Opera),
    ("opr", Browser.Opera),
    ("dolphin", Browser.Dolphin),
    ("brave", Browser.Brave),
    ("puffin", Browser.Puffin),
    ("maxthon", Browser.Maxthon),
    ("mercury", Browser.Mercury),
    ("silk", Browser.Silk),
    ("vivaldi", Browser.Vivaldi),
    ("yabrowser", Browser.Yandex),
    ("duckduckgo", Browser.DuckDuckGo),
    ("tor", Browser.Tor),
    ("electron", Browser.Electron),
    ("phantomjs", Browser.PhantomJS),
    ("wv", Browser.WebView),
    ("fban", Browser.Facebook),
    ("fbav", Browser.Facebook),
    ("instagram", Browser.Instagram),
    ("twitter", Browser.Twitter),
    ("snapchat", Browser.Snapchat),
    ("googlebot", Browser.Googlebot),
    ("bingbot", Browser.Bingbot),
    ("yahoo! slurp", Browser.Yahoo),
    ("baiduspider", Browser.Baidu),
)

BROWSER_GENERIC: TokenPairs = (
    ("chrome", Browser.Chrome),
    ("safari", Browser.Safari),
    ("firefox", Browser.Firefox),
)

# Devices
DEVICE_SPECIFIC: TokenPairs = (
    # Kindle Fire
    ("kfmawi", DeviceType.Tablet),
    ("ipod", DeviceType.Mobile),
    ("windows phone", DeviceType.Mobile),
    ("blackberry", DeviceType.Mobile),
    ("symbian", DeviceType.Mobile),
    ("ipad", DeviceType.Tablet),
    ("tablet", DeviceType.Tablet),
    ("kindle", DeviceType.Tablet),
    ("playbook", DeviceType.Tablet),
    ("nexus", DeviceType.Tablet),
    # Samsung model prefixes
    ("sm-t", DeviceType.Tablet),
    ("sm-x", DeviceType.Tablet),
    ("sm-s", DeviceType.Mobile),
    ("gt-p", DeviceType.Tablet),
    # Consoles
    ("playstation", DeviceType.Game),
    ("ps4", DeviceType.Game),
    ("ps5", DeviceType.Game),
    ("xbox", DeviceType.Game),
    ("nintendo", DeviceType.Game),
    ("wii", DeviceType.Game),
    # TV and streaming
    ("smart-tv", DeviceType.TV),
    ("tv", DeviceType.TV),
    ("appletv", DeviceType.TV),
    ("roku", DeviceType.TV),
    ("chromecast", DeviceType.TV),
    ("crkey", DeviceType.TV),
    ("fire tv", DeviceType.TV),
    # Wearables
    ("watch", DeviceType.Smartwatch),
    ("apple watch", DeviceType.Smartwatch),
    # VR
    ("vive", DeviceType.VRHeadset),
    ("oculus", DeviceType.VRHeadset),
    # Automotive
    ("tesla", DeviceType.CarSystem),
    ("android auto", DeviceType.CarSystem),
    ("carplay", DeviceType.CarSystem),
    # Crawlers
    ("googlebot", DeviceType.Bot),
    ("bingbot", DeviceType.Bot),
    ("slurp", DeviceType.Bot),
    ("baiduspider", DeviceType.Bot),
    ("facebookexternalhit", DeviceType.Bot),
    ("twitterbot", DeviceType.Bot),
    ("monitoring", DeviceType.Bot),
    ("scraper", DeviceType.Bot),
    ("yandexbot", DeviceType.Bot),
)

DEVICE_GENERIC: TokenPairs = (
    ("android", DeviceType.Mobile),
    ("iphone", DeviceType.Mobile),
    ("x11", DeviceType.Desktop),
    ("x86_64", DeviceType.Desktop),
)

# Case-sensitive on purpose, checked only when both device groups miss
DESKTOP_FALLBACK_MARKERS: Tuple[str, ...] = ("Windows", "Macintosh", "Linux")


# Built once at import, read-only afterwards
OS_TABLE = PatternTable(TokenGroup(OS_SPECIFIC), TokenGroup(OS_GENERIC), OperatingSystem.Unknown)
BROWSER_TABLE = PatternTable(TokenGroup(BROWSER_SPECIFIC), TokenGroup(BROWSER_GENERIC), Browser.Unknown)
DEVICE_TABLE = PatternTable(TokenGroup(DEVICE_SPECIFIC), TokenGroup(DEVICE_GENERIC), DeviceType.Unknown)
