# ua_classifier/schemas.py

from pydantic import BaseModel
from typing import List, Optional
from ua_classifier.categories import Browser, DeviceType, OperatingSystem


class ClassificationResult(BaseModel):
    """Classification of a single user agent string"""

    os: OperatingSystem = OperatingSystem.Unknown
    browser: Browser = Browser.Unknown
    device_type: DeviceType = DeviceType.Unknown

    class Config:
        frozen = True


class ClassifyRequest(BaseModel):
    """Incoming item for the classify endpoint"""

    user_agent: Optional[str] = ""

    class Config:
        extra = "ignore"  # Ignore unexpected fields


class ClassifyResponse(BaseModel):
    status: str
    processed: int
    errors: int = 0
    results: List[ClassificationResult] = []


class CategoriesResponse(BaseModel):
    os: List[str]
    browser: List[str]
    device_type: List[str]
