# ua_classifier/__init__.py

from ua_classifier.categories import Browser, DeviceType, OperatingSystem
from ua_classifier.classifier import classify_user_agent
from ua_classifier.schemas import ClassificationResult

__all__ = [
    "Browser",
    "ClassificationResult",
    "DeviceType",
    "OperatingSystem",
    "classify_user_agent",
]
