"""
                        Services Module

Contains the notification services with the hybrid architecture pattern.
Each gateway has Mock (development) and Real (production) implementations.

Services:
    - notifications: WhatsApp booking decision messages via Twilio
"""

from quickcourt.services.notifications import get_notification_service

__all__ = ["get_notification_service"]
