"""
Notification Service Factory

Returns a BookingNotificationService backed by the Mock or Twilio WhatsApp
gateway based on ENV_MODE. Both are built once per process.

Usage:
    from quickcourt.services.notifications import get_notification_service

    notifications = get_notification_service()
    sent = await notifications.send_booking_approved_notification(
        user_phone="98765 43210",
        facts=BookingFacts(...),
    )
"""

import logging
from functools import lru_cache

from quickcourt.core.config import get_settings
from quickcourt.services.notifications.base import (
    BaseMessagingGateway,
    DeliveryFailure,
    DeliveryResult,
)
from quickcourt.services.notifications.mock import MockWhatsAppGateway
from quickcourt.services.notifications.phone import normalize_phone_number
from quickcourt.services.notifications.service import BookingNotificationService
from quickcourt.services.notifications.templates import render
from quickcourt.services.notifications.twilio_whatsapp import TwilioWhatsAppGateway

logger = logging.getLogger(__name__)


@lru_cache()
def get_messaging_gateway() -> BaseMessagingGateway:
    """Get the configured messaging gateway."""
    settings = get_settings()

    if settings.is_development:
        logger.info("Messaging Gateway: Using MockWhatsAppGateway (development mode)")
        return MockWhatsAppGateway()
    else:
        logger.info(f"Messaging Gateway: Using TwilioWhatsAppGateway ({settings.env_mode.value} mode)")
        return TwilioWhatsAppGateway(settings.gateway_credentials())


@lru_cache()
def get_notification_service() -> BookingNotificationService:
    """Get the process-wide booking notification service."""
    settings = get_settings()
    return BookingNotificationService(
        gateway=get_messaging_gateway(),
        default_country_code=settings.default_country_code,
        sign_off=settings.notification_sign_off,
    )


def reset_notification_service() -> None:
    """Clear the cached service and gateway instances."""
    get_notification_service.cache_clear()
    get_messaging_gateway.cache_clear()


__all__ = [
    "get_messaging_gateway",
    "get_notification_service",
    "reset_notification_service",
    "BaseMessagingGateway",
    "BookingNotificationService",
    "DeliveryFailure",
    "DeliveryResult",
    "MockWhatsAppGateway",
    "TwilioWhatsAppGateway",
    "normalize_phone_number",
    "render",
]
