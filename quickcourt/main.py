"""
FastAPI Application Entry Point

QuickCourt Notifications - Hybrid Architecture
Supports both a Mock gateway (development) and Twilio WhatsApp (production).

The booking workflow calls the notification service in-process; this app
only exposes the process health so deployments can see whether WhatsApp
sending is enabled.

Endpoints:
    - GET /: Service information
    - GET /health: Notification gateway health
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from quickcourt.core.config import get_settings, setup_logging
from quickcourt.schemas import HealthResponse
from quickcourt.services.notifications import get_notification_service

# Initialize configuration and logging
settings = get_settings()
setup_logging()
logger = logging.getLogger(__name__)


# =============================================================================
# APPLICATION LIFECYCLE
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application startup and shutdown events.
    """
    logger.info("=" * 60)
    logger.info(f"🚀 Starting {settings.app_name}")
    logger.info(f"   Version: {settings.app_version}")
    logger.info(f"   Environment: {settings.env_mode.value}")
    logger.info(f"   Debug: {settings.debug}")
    logger.info("=" * 60)

    notifications = get_notification_service()
    logger.info(f"✅ Notification Gateway: {notifications.provider_name}")
    if not notifications.is_available():
        logger.warning("⚠️ WhatsApp notifications disabled for this process")

    if settings.use_real_services:
        missing = settings.validate_production_config()
        if missing:
            logger.warning(f"⚠️ Missing production config: {missing}")

    logger.info("=" * 60)
    logger.info("✅ Application ready!")
    logger.info("=" * 60)

    yield

    logger.info("Shutting down...")


# =============================================================================
# APPLICATION INSTANCE
# =============================================================================

app = FastAPI(
    title=settings.app_name,
    description=(
        "WhatsApp booking notifications for QuickCourt. "
        "Supports a mock gateway for development and Twilio for production."
    ),
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.get("/", tags=["Info"])
async def root() -> dict[str, Any]:
    """Service information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "environment": settings.env_mode.value,
        "health": "/health",
    }


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Notification Health Check",
)
async def health_check() -> HealthResponse:
    """Report whether WhatsApp notifications can be sent by this process."""
    notifications = get_notification_service()
    available = notifications.is_available()

    return HealthResponse(
        status="healthy" if available else "degraded",
        environment=settings.env_mode.value,
        notification_provider=notifications.provider_name,
        whatsapp_available=available,
        timestamp=datetime.now(),
    )


# =============================================================================
# ERROR HANDLERS
# =============================================================================

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all exception handler."""
    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": "Internal Server Error",
            "detail": str(exc) if settings.debug else "An unexpected error occurred",
        },
    )
