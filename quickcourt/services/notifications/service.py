"""
Booking Notification Service

Entry point for the booking workflow. Each call renders the message,
normalizes the recipient and hands both to the gateway, in that order.
Rendering always runs, even when the gateway is disabled.

No exception leaves this service: a booking decision stands whether or
not the user could be told about it.
"""

import logging
from typing import Union

from pydantic import ValidationError

from quickcourt.schemas import BookingFacts, NotificationKind, NotificationRequest
from quickcourt.services.notifications.base import (
    BaseMessagingGateway,
    DeliveryFailure,
    DeliveryResult,
)
from quickcourt.services.notifications.phone import (
    INDIA_COUNTRY_CODE,
    normalize_phone_number,
)
from quickcourt.services.notifications.templates import DEFAULT_SIGN_OFF, render

logger = logging.getLogger(__name__)


class BookingNotificationService:
    """Sends booking approval and rejection messages."""

    def __init__(
        self,
        gateway: BaseMessagingGateway,
        default_country_code: str = INDIA_COUNTRY_CODE,
        sign_off: str = DEFAULT_SIGN_OFF,
    ):
        self.gateway = gateway
        self.default_country_code = default_country_code
        self.sign_off = sign_off

    @property
    def provider_name(self) -> str:
        return self.gateway.provider_name

    def is_available(self) -> bool:
        return self.gateway.is_available()

    async def notify(self, request: NotificationRequest) -> DeliveryResult:
        """
        Deliver one booking decision.

        Args:
            request: Notification kind, raw recipient and booking facts

        Returns:
            DeliveryResult: Outcome with failure cause, never raises
        """
        try:
            body = render(request.kind, request.facts, sign_off=self.sign_off)
            to = normalize_phone_number(
                request.recipient_raw,
                default_country_code=self.default_country_code,
            )
            result = await self.gateway.send_message(to, body)
        except Exception as e:
            logger.exception(f"Unexpected error sending {request.kind.value} notification: {e}")
            return DeliveryResult(
                success=False,
                failure=DeliveryFailure.TRANSPORT_ERROR,
                error_message=str(e),
                provider=self.provider_name,
            )

        if result.success:
            logger.info(f"{request.kind.value} notification sent to {to} (ID: {result.message_id})")
        else:
            logger.warning(
                f"{request.kind.value} notification to {to} not sent: "
                f"{result.failure.value if result.failure else 'unknown'}"
            )
        return result

    async def _send(
        self,
        kind: NotificationKind,
        user_phone: str,
        facts: Union[BookingFacts, dict],
    ) -> bool:
        try:
            request = NotificationRequest(kind=kind, recipient_raw=user_phone, facts=facts)
        except ValidationError as e:
            logger.error(f"Invalid {kind.value} notification request: {e}")
            return False

        result = await self.notify(request)
        return result.success

    async def send_booking_approved_notification(
        self,
        user_phone: str,
        facts: Union[BookingFacts, dict],
    ) -> bool:
        """Tell the user their booking was approved."""
        return await self._send(NotificationKind.BOOKING_APPROVED, user_phone, facts)

    async def send_booking_rejected_notification(
        self,
        user_phone: str,
        facts: Union[BookingFacts, dict],
    ) -> bool:
        """Tell the user their booking was declined, with the reason if given."""
        return await self._send(NotificationKind.BOOKING_REJECTED, user_phone, facts)
