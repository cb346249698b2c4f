# ua_classifier/categories.py

from enum import Enum


class OperatingSystem(str, Enum):
    """Operating system family"""

    Windows = "Windows"
    WindowsPhone = "WindowsPhone"
    MacOS = "MacOS"
    IOS = "IOS"
    IPadOS = "IPadOS"
    Android = "Android"
    Linux = "Linux"
    Ubuntu = "Ubuntu"
    Fedora = "Fedora"
    Debian = "Debian"
    ChromeOS = "ChromeOS"
    BlackBerry = "BlackBerry"
    Symbian = "Symbian"
    WebOS = "WebOS"
    Bada = "Bada"
    Tizen = "Tizen"
    Nintendo = "Nintendo"
    PlayStation = "PlayStation"
    Xbox = "Xbox"
    Wii = "Wii"
    FreeBSD = "FreeBSD"
    OpenBSD = "OpenBSD"
    Solaris = "Solaris"
    AIX = "AIX"
    HPUX = "HPUX"
    HarmonyOS = "HarmonyOS"
    KaiOS = "KaiOS"
    Unknown = "Unknown"


class Browser(str, Enum):
    """Client / browser family"""

    Chrome = "Chrome"
    Safari = "Safari"
    Firefox = "Firefox"
    Edge = "Edge"
    InternetExplorer = "InternetExplorer"
    Opera = "Opera"
    Dolphin = "Dolphin"
    Brave = "Brave"
    Puffin = "Puffin"
    Maxthon = "Maxthon"
    Mercury = "Mercury"
    Silk = "Silk"
    Vivaldi = "Vivaldi"
    Yandex = "Yandex"
    DuckDuckGo = "DuckDuckGo"
    Tor = "Tor"
    Electron = "Electron"
    PhantomJS = "PhantomJS"
    WebView = "WebView"
    Facebook = "Facebook"
    Instagram = "Instagram"
    Twitter = "Twitter"
    Snapchat = "Snapchat"
    Googlebot = "Googlebot"
    Bingbot = "Bingbot"
    Yahoo = "Yahoo"
    Baidu = "Baidu"
    UCBrowser = "UCBrowser"
    SamsungBrowser = "SamsungBrowser"
    OculusBrowser = "OculusBrowser"
    Unknown = "Unknown"


class DeviceType(str, Enum):
    """Device form factor"""

    Mobile = "Mobile"
    Tablet = "Tablet"
    Desktop = "Desktop"
    Game = "Game"
    TV = "TV"
    Smartwatch = "Smartwatch"
    VRHeadset = "VRHeadset"
    CarSystem = "CarSystem"
    Bot = "Bot"
    Unknown = "Unknown"
