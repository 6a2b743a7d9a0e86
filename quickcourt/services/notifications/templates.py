"""
WhatsApp Message Templates

Builds the text of booking decision messages. Everything here is pure:
the same facts always produce the same message, byte for byte.

WhatsApp renders *text* as bold, which the templates rely on.
"""

import logging
from datetime import date, datetime
from typing import Optional, Union

from quickcourt.schemas import BookingFacts, NotificationKind

logger = logging.getLogger(__name__)

CURRENCY_SYMBOL = "₹"
DEFAULT_SIGN_OFF = "QuickCourt Team"
DATE_FORMAT = "%a, %b %d, %Y"


def format_booking_date(value: Union[date, datetime, str, None]) -> str:
    """
    Format a booking date as "Mon, Jan 05, 2026".

    Strings are parsed as ISO-8601 (a trailing "Z" is accepted). Values
    that cannot be parsed are returned as text rather than raising.
    """
    if isinstance(value, (datetime, date)):
        return value.strftime(DATE_FORMAT)

    text = "" if value is None else str(value).strip()
    if not text:
        return text

    try:
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug(f"Unparseable booking date {value!r}, rendering as-is")
        return str(value)

    return parsed.strftime(DATE_FORMAT)


def _text(value: Optional[str]) -> str:
    return "" if value is None else value


def format_time_slot(start_time: Optional[str], end_time: Optional[str]) -> str:
    return f"{_text(start_time)} - {_text(end_time)}"


def _booking_lines(facts: BookingFacts) -> list[str]:
    return [
        f"🏟️ *Facility:* {_text(facts.facility_name)}",
        f"🎾 *Court:* {_text(facts.court_name)}",
        f"📅 *Date:* {format_booking_date(facts.booking_date)}",
        f"⏰ *Time:* {format_time_slot(facts.start_time, facts.end_time)}",
    ]


def render_booking_approved(facts: BookingFacts, sign_off: str = DEFAULT_SIGN_OFF) -> str:
    lines = [
        "🎉 *Booking Confirmed!*",
        "",
        f"Hi {_text(facts.user_name)}! Great news! ✅",
        "",
        "Your court booking has been approved:",
        "",
        *_booking_lines(facts),
        f"💰 *Amount:* {CURRENCY_SYMBOL}{_text(facts.amount)}",
        "",
        "*What's next?*",
        "• Arrive 10 minutes early",
        "• Bring valid ID",
        "• Check facility guidelines",
        "",
        "Have an amazing game! 🏆",
        "",
        f"*{sign_off}*",
    ]
    return "\n".join(lines)


def render_booking_rejected(facts: BookingFacts, sign_off: str = DEFAULT_SIGN_OFF) -> str:
    lines = [
        "❌ *Booking Update*",
        "",
        f"Hi {_text(facts.user_name)},",
        "",
        "Unfortunately, your booking request has been declined:",
        "",
        *_booking_lines(facts),
        "",
    ]

    reason = (facts.reason or "").strip()
    if reason:
        lines += [f"*Reason:* {reason}", ""]

    lines += [
        "Don't worry! 💪 Try booking another slot or contact the facility "
        "directly for more options.",
        "",
        f"*{sign_off}*",
    ]
    return "\n".join(lines)


_RENDERERS = {
    NotificationKind.BOOKING_APPROVED: render_booking_approved,
    NotificationKind.BOOKING_REJECTED: render_booking_rejected,
}


def render(
    kind: NotificationKind,
    facts: BookingFacts,
    sign_off: str = DEFAULT_SIGN_OFF,
) -> str:
    """
    Render the message body for a notification kind.

    Args:
        kind: Which booking decision is being announced
        facts: Booking details
        sign_off: Team name printed in bold on the last line

    Returns:
        str: Plain-text WhatsApp message body
    """
    return _RENDERERS[NotificationKind(kind)](facts, sign_off=sign_off)
