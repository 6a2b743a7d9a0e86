"""
Pydantic Schemas for Notification Requests and Responses

Booking facts arrive from the booking workflow already decided; these
models only shape them. Nothing here rejects a booking: bad dates are
carried through as raw text and rendered best-effort.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# ENUMS
# =============================================================================

class NotificationKind(str, Enum):
    BOOKING_APPROVED = "booking_approved"
    BOOKING_REJECTED = "booking_rejected"


# =============================================================================
# NOTIFICATION SCHEMAS
# =============================================================================

class BookingFacts(BaseModel):
    """
    Booking details used to build a notification message.

    Every fact is optional and coerced to text where possible. Missing
    values render as blanks and a bad date renders as typed, so a sloppy
    payload still produces a message.
    """
    user_name: Optional[str] = None
    facility_name: Optional[str] = None
    court_name: Optional[str] = None
    booking_date: Optional[Union[datetime, date, str]] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    amount: Optional[str] = Field(
        default=None,
        description="Decimal string, rendered verbatim after the rupee sign"
    )
    reason: Optional[str] = Field(
        default=None,
        description="Rejection reason, ignored for approvals"
    )

    @field_validator(
        "user_name",
        "facility_name",
        "court_name",
        "start_time",
        "end_time",
        "amount",
        "reason",
        mode="before",
    )
    @classmethod
    def facts_as_text(cls, v):
        """Accept numbers and other scalars, e.g. amount=750, as their text form."""
        if v is None or isinstance(v, str):
            return v
        return str(v)

    @field_validator("booking_date", mode="before")
    @classmethod
    def date_as_given(cls, v):
        """Keep dates and strings; anything else is carried as text."""
        if v is None or isinstance(v, (datetime, date, str)):
            return v
        return str(v)


class NotificationRequest(BaseModel):
    """One booking decision to deliver to one phone number."""
    kind: NotificationKind
    recipient_raw: Optional[str] = None
    facts: BookingFacts


# =============================================================================
# HEALTH SCHEMAS
# =============================================================================

class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    environment: str
    notification_provider: str
    whatsapp_available: bool
    timestamp: datetime
