"""
Mock WhatsApp Gateway

Simulates WhatsApp delivery for development.
No actual messages are sent - they are logged, and the most recent
ones are kept in memory for inspection.
"""

import logging
import random
import uuid
from collections import deque
from dataclasses import dataclass

from quickcourt.services.notifications.base import (
    BaseMessagingGateway,
    DeliveryFailure,
    DeliveryResult,
)
from quickcourt.services.notifications.phone import is_deliverable_address

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SentMessage:
    message_id: str
    to: str
    body: str


class MockWhatsAppGateway(BaseMessagingGateway):
    """Mock gateway for development and tests."""

    def __init__(self, failure_rate: float = 0.0, history_size: int = 100):
        self.failure_rate = failure_rate
        self.sent_messages: deque[SentMessage] = deque(maxlen=history_size)
        logger.info(f"MockWhatsAppGateway initialized (failure_rate={failure_rate:.0%})")

    @property
    def provider_name(self) -> str:
        return "mock"

    def is_available(self) -> bool:
        return True

    def _should_fail(self) -> bool:
        return random.random() < self.failure_rate

    async def send_message(self, to: str, body: str) -> DeliveryResult:
        """Simulate sending a WhatsApp message."""
        if not is_deliverable_address(to):
            logger.warning(f"Mock WhatsApp refused unusable address {to!r}")
            return DeliveryResult(
                success=False,
                failure=DeliveryFailure.INVALID_ADDRESS,
                error_message=f"Unusable recipient address: {to!r}",
                provider="mock",
            )

        if self._should_fail():
            logger.warning(f"Mock WhatsApp failed (simulated) to {to}")
            return DeliveryResult(
                success=False,
                failure=DeliveryFailure.TRANSPORT_ERROR,
                error_message="Simulated WhatsApp failure",
                provider="mock",
            )

        message_id = f"wa_mock_{uuid.uuid4().hex[:12]}"
        self.sent_messages.append(SentMessage(message_id=message_id, to=to, body=body))
        logger.info(f"Mock WhatsApp sent to {to}: {body[:50]}... (ID: {message_id})")

        return DeliveryResult(
            success=True,
            message_id=message_id,
            provider="mock",
        )
