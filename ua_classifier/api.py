# ua_classifier/api.py

from fastapi import APIRouter, Header, Request
from typing import Optional
from ua_classifier.categories import Browser, DeviceType, OperatingSystem
from ua_classifier.classifier import classify_user_agent
from ua_classifier.config import settings
from ua_classifier.schemas import (
    CategoriesResponse,
    ClassificationResult,
    ClassifyRequest,
    ClassifyResponse,
)
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/classify", response_model=ClassifyResponse)
async def classify_batch(request: Request) -> ClassifyResponse:
    """
    Classify user agent strings.
    Accepts single object or array of objects.
    """
    try:
        body = await request.json()
    except ValueError as e:
        logger.warning(f"Rejected malformed request body: {e}")
        return ClassifyResponse(status="error", processed=0, errors=1)

    # Normalize to list
    if isinstance(body, dict):
        items = [body]
    elif isinstance(body, list):
        items = body
    else:
        return ClassifyResponse(status="error", processed=0, errors=1)

    if len(items) > settings.max_batch_size:
        logger.warning(f"Rejected batch of {len(items)} items (limit {settings.max_batch_size})")
        return ClassifyResponse(status="error", processed=0, errors=len(items))

    processed = 0
    errors = 0
    results = []

    for item in items:
        try:
            classify_request = ClassifyRequest.model_validate(item)
            results.append(classify_user_agent(classify_request.user_agent))
            processed += 1

        except Exception as e:
            errors += 1
            logger.warning(f"Failed to classify item: {e}")

    return ClassifyResponse(
        status="ok" if errors == 0 else "partial",
        processed=processed,
        errors=errors,
        results=results,
    )


@router.get("/api/classify", response_model=ClassificationResult)
async def classify_single(
    ua: Optional[str] = None,
    user_agent: Optional[str] = Header(default=None),
) -> ClassificationResult:
    """Classify the `ua` query parameter, or the caller's own User-Agent header"""
    return classify_user_agent(ua if ua is not None else user_agent)


@router.get("/api/categories", response_model=CategoriesResponse)
async def list_categories() -> CategoriesResponse:
    """All category names each detector can emit"""
    return CategoriesResponse(
        os=[member.name for member in OperatingSystem],
        browser=[member.name for member in Browser],
        device_type=[member.name for member in DeviceType],
    )


@router.get("/health")
async def health_check():
    """Simple health check endpoint"""
    return {"status": "healthy"}
