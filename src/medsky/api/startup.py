"""
Application startup and shutdown handlers.

Builds the service singletons when the FastAPI application starts and
releases the PubMed session and database connections when it stops.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown.

    Args:
        app: FastAPI application instance

    Yields:
        None (control is yielded to the application)
    """
    from medsky.api.dependencies import get_auth_provider, get_case_service, shutdown_services

    logger.info("🚀 Starting MedSky application...")

    try:
        get_auth_provider()
        get_case_service()
        logger.info("✅ Application startup complete")
    except Exception as e:
        logger.error(f"❌ Failed to initialize application: {e}")
        raise

    yield

    logger.info("🛑 Shutting down MedSky application...")

    try:
        shutdown_services()
        logger.info("✅ Application shutdown complete")
    except Exception as e:
        logger.error(f"❌ Error during shutdown: {e}")


def get_lifespan():
    """Get the lifespan context manager for FastAPI."""
    return lifespan
