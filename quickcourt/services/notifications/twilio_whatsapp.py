"""
Twilio WhatsApp Gateway

Production gateway delivering messages over Twilio's WhatsApp channel.

The Twilio client is created once, at construction, and only when all
three credentials are present. Without them the gateway stays disabled
for the life of the process and every send fails fast without touching
the network. Each send is exactly one Messages API call: no retry, no
polling for delivery status.
"""

import asyncio
import logging
from typing import Optional

from twilio.base.exceptions import TwilioException, TwilioRestException
from twilio.rest import Client as TwilioClient

from quickcourt.core.config import GatewayCredentials
from quickcourt.services.notifications.base import (
    BaseMessagingGateway,
    DeliveryFailure,
    DeliveryResult,
)
from quickcourt.services.notifications.phone import is_deliverable_address

logger = logging.getLogger(__name__)

WHATSAPP_SCHEME = "whatsapp:"
CHANNEL_NOT_FOUND_CODE = 63007
SANDBOX_SENDER = "+14155238886"


def to_whatsapp_address(address: str) -> str:
    """Apply the WhatsApp channel scheme unless it is already there."""
    if address.startswith(WHATSAPP_SCHEME):
        return address
    return f"{WHATSAPP_SCHEME}{address}"


class TwilioWhatsAppGateway(BaseMessagingGateway):
    """WhatsApp delivery through the Twilio Messages API."""

    def __init__(
        self,
        credentials: GatewayCredentials,
        client: Optional[TwilioClient] = None,
    ):
        self.credentials = credentials
        self.from_address = (
            to_whatsapp_address(credentials.from_number.strip())
            if credentials.from_number and credentials.from_number.strip()
            else ""
        )

        logger.info("Twilio credentials check:")
        logger.info(f"- Account SID: {credentials.masked_account_sid}")
        logger.info(f"- Auth Token: {'PROVIDED' if credentials.auth_token else 'MISSING'}")
        logger.info(f"- WhatsApp From: {credentials.from_number or 'MISSING'}")

        if credentials.is_complete:
            self.client = client or TwilioClient(
                credentials.account_sid,
                credentials.auth_token,
            )
            logger.info("WhatsApp gateway initialized")
        else:
            self.client = None
            logger.warning("WhatsApp gateway disabled - missing Twilio credentials")

    @property
    def provider_name(self) -> str:
        return "twilio_whatsapp"

    def is_available(self) -> bool:
        return self.client is not None and self.from_address != ""

    async def send_message(self, to: str, body: str) -> DeliveryResult:
        """Send a WhatsApp message via Twilio."""
        if not self.is_available():
            logger.info("WhatsApp gateway not available - message not sent")
            return DeliveryResult(
                success=False,
                failure=DeliveryFailure.DISABLED,
                error_message="Twilio WhatsApp not configured",
                provider=self.provider_name,
            )

        if not is_deliverable_address(to):
            logger.warning(f"Refusing to send WhatsApp message to unusable address {to!r}")
            return DeliveryResult(
                success=False,
                failure=DeliveryFailure.INVALID_ADDRESS,
                error_message=f"Unusable recipient address: {to!r}",
                provider=self.provider_name,
            )

        to_address = to_whatsapp_address(to)
        logger.info(f"Sending WhatsApp message from {self.from_address} to {to_address}")
        logger.debug(f"Message content: {body[:100]}...")

        try:
            result = await asyncio.to_thread(
                self.client.messages.create,
                body=body,
                from_=self.from_address,
                to=to_address,
            )

        except TwilioRestException as e:
            logger.error(f"Twilio rejected WhatsApp message to {to_address}: {e}")
            if e.code == CHANNEL_NOT_FOUND_CODE:
                self._log_channel_not_found()
            return DeliveryResult(
                success=False,
                failure=DeliveryFailure.PROVIDER_REJECTED,
                error_code=e.code,
                error_message=e.msg,
                provider=self.provider_name,
            )

        except TwilioException as e:
            logger.error(f"Twilio error: {e}")
            return DeliveryResult(
                success=False,
                failure=DeliveryFailure.PROVIDER_REJECTED,
                error_message=str(e),
                provider=self.provider_name,
            )

        except Exception as e:
            logger.error(f"Failed to send WhatsApp message: {e}")
            return DeliveryResult(
                success=False,
                failure=DeliveryFailure.TRANSPORT_ERROR,
                error_message=str(e),
                provider=self.provider_name,
            )

        logger.info(f"WhatsApp message sent successfully. SID: {result.sid}")
        return DeliveryResult(
            success=True,
            message_id=result.sid,
            provider=self.provider_name,
        )

    def _log_channel_not_found(self) -> None:
        logger.error(
            f"Twilio Error {CHANNEL_NOT_FOUND_CODE}: WhatsApp channel not found. "
            f"The sender {self.credentials.from_number} is not set up for WhatsApp. "
            f"Use the Twilio sandbox number {SANDBOX_SENDER} (after sending "
            f"\"join <sandbox-word>\" to it from your phone) or register a "
            f"WhatsApp Business sender, then update TWILIO_WHATSAPP_FROM."
        )
