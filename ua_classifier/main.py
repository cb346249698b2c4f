# ua_classifier/main.py

from contextlib import asynccontextmanager
from fastapi import FastAPI
from ua_classifier.config import settings
from ua_classifier.api import router as classify_router
from ua_classifier.patterns import BROWSER_TABLE, DEVICE_TABLE, OS_TABLE
import logging

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""

    # Startup
    logger.info("Starting User Agent Classifier API...")

    token_count = sum(
        len(group.pairs)
        for table in (OS_TABLE, BROWSER_TABLE, DEVICE_TABLE)
        for group in table.groups
    )
    logger.info(f"Pattern tables loaded - {token_count} tokens")

    logger.info(f"User Agent Classifier API ready on {settings.host}:{settings.port}")

    yield

    # Shutdown
    logger.info("Shutting down...")


app = FastAPI(
    title="User Agent Classifier API",
    description="Classifies user agent strings into OS, browser and device type",
    version="1.0.0",
    lifespan=lifespan,
)

# Register routes
app.include_router(classify_router)
