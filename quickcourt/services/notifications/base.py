"""
Messaging Gateway Abstract Base Class

Defines the interface for delivering a rendered message to a canonical
phone address. Supports both Mock (development) and Twilio WhatsApp
(production) implementations.

Callers outside this package only ever see a boolean. DeliveryResult
keeps the failure cause for logging and for callers that want it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class DeliveryFailure(str, Enum):
    """Why a message was not accepted by the provider."""
    DISABLED = "disabled"
    INVALID_ADDRESS = "invalid_address"
    PROVIDER_REJECTED = "provider_rejected"
    TRANSPORT_ERROR = "transport_error"


@dataclass
class DeliveryResult:
    """
    Result from submitting one message.

    Attributes:
        success: Provider accepted the submission
        message_id: Provider message identifier (log only)
        failure: Failure category when success is False
        error_code: Provider error code, if any
        error_message: Error description
        provider: Gateway that handled the message
    """
    success: bool
    message_id: Optional[str] = None
    failure: Optional[DeliveryFailure] = None
    error_code: Optional[Union[int, str]] = None
    error_message: Optional[str] = None
    provider: str = "unknown"

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "success": self.success,
            "message_id": self.message_id,
            "failure": self.failure.value if self.failure else None,
            "error_code": self.error_code,
            "error_message": self.error_message,
            "provider": self.provider,
        }


class BaseMessagingGateway(ABC):
    """Abstract base class for messaging gateways."""

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Whether the gateway was configured to send at construction."""
        pass

    @abstractmethod
    async def send_message(self, to: str, body: str) -> DeliveryResult:
        """
        Submit one message. Must not raise.

        Args:
            to: Canonical recipient address, e.g. "+919876543210"
            body: Plain-text message

        Returns:
            DeliveryResult: Outcome of the single submission attempt
        """
        pass

    async def send(self, to: str, body: str) -> bool:
        """Submit one message and report only whether it was accepted."""
        result = await self.send_message(to, body)
        return result.success
