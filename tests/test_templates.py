"""Tests for WhatsApp message templates."""

from datetime import date, datetime

import pytest

from quickcourt.schemas import BookingFacts, NotificationKind
from quickcourt.services.notifications.templates import (
    format_booking_date,
    format_time_slot,
    render,
)


class TestFormatBookingDate:
    """Test booking date formatting."""

    def test_iso_date_string(self):
        assert format_booking_date("2026-01-05") == "Mon, Jan 05, 2026"

    def test_iso_datetime_with_zulu(self):
        assert format_booking_date("2026-01-05T00:00:00Z") == "Mon, Jan 05, 2026"

    def test_date_and_datetime_objects(self):
        assert format_booking_date(date(2026, 1, 5)) == "Mon, Jan 05, 2026"
        assert format_booking_date(datetime(2026, 1, 5, 18, 0)) == "Mon, Jan 05, 2026"

    @pytest.mark.parametrize("value", ["next tuesday", "2026-13-45", "05/01/2026"])
    def test_unparseable_falls_back_to_raw(self, value):
        assert format_booking_date(value) == value

    def test_empty(self):
        assert format_booking_date("") == ""
        assert format_booking_date(None) == ""


def test_format_time_slot():
    assert format_time_slot("18:00", "19:00") == "18:00 - 19:00"


class TestRenderApproved:
    """Test the booking approved message."""

    def test_contains_booking_details(self, approved_facts):
        body = render(NotificationKind.BOOKING_APPROVED, approved_facts)

        assert body.startswith("🎉 *Booking Confirmed!*")
        assert "Hi Asha! Great news! ✅" in body
        assert "🏟️ *Facility:* City Arena" in body
        assert "🎾 *Court:* Court 2" in body
        assert "📅 *Date:* Mon, Jan 05, 2026" in body
        assert "⏰ *Time:* 18:00 - 19:00" in body
        assert "💰 *Amount:* ₹500" in body

    def test_checklist_and_sign_off(self, approved_facts):
        body = render(NotificationKind.BOOKING_APPROVED, approved_facts)

        assert "• Arrive 10 minutes early" in body
        assert "• Bring valid ID" in body
        assert "• Check facility guidelines" in body
        assert body.endswith("*QuickCourt Team*")

    def test_custom_sign_off(self, approved_facts):
        body = render(NotificationKind.BOOKING_APPROVED, approved_facts, sign_off="Arena Desk")
        assert body.endswith("*Arena Desk*")

    def test_values_rendered_verbatim(self):
        facts = BookingFacts(
            user_name="Ravi",
            facility_name="Smash & Co. *Indoor*",
            court_name="Badminton Court #3",
            booking_date="2026-02-14",
            start_time="06:30 AM",
            end_time="07:30 AM",
            amount="1,250.50",
        )
        body = render(NotificationKind.BOOKING_APPROVED, facts)

        assert "Smash & Co. *Indoor*" in body
        assert "Badminton Court #3" in body
        assert "₹1,250.50" in body
        assert "06:30 AM - 07:30 AM" in body

    def test_numeric_amount_kept_as_text(self):
        facts = BookingFacts(
            user_name="Ravi",
            facility_name="City Arena",
            court_name="Court 1",
            booking_date="2026-02-14",
            start_time="10:00",
            end_time="11:00",
            amount=750,
        )
        assert "₹750" in render(NotificationKind.BOOKING_APPROVED, facts)

    def test_bad_date_still_renders(self, approved_facts):
        facts = approved_facts.model_copy(update={"booking_date": "someday"})
        body = render(NotificationKind.BOOKING_APPROVED, facts)
        assert "📅 *Date:* someday" in body

    def test_idempotent(self, approved_facts):
        first = render(NotificationKind.BOOKING_APPROVED, approved_facts)
        second = render(NotificationKind.BOOKING_APPROVED, approved_facts)
        assert first == second


class TestRenderRejected:
    """Test the booking rejected message."""

    def test_declined_without_reason(self, rejected_facts):
        body = render(NotificationKind.BOOKING_REJECTED, rejected_facts)

        assert body.startswith("❌ *Booking Update*")
        assert "has been declined" in body
        assert "City Arena" in body
        assert "Court 2" in body
        assert "18:00 - 19:00" in body
        assert "Reason" not in body
        assert "\n\n\n" not in body
        assert body.endswith("*QuickCourt Team*")

    def test_declined_with_reason(self, rejected_facts):
        facts = rejected_facts.model_copy(update={"reason": "Maintenance"})
        body = render(NotificationKind.BOOKING_REJECTED, facts)

        lines = body.splitlines()
        assert "*Reason:* Maintenance" in lines

    @pytest.mark.parametrize("reason", ["", "   "])
    def test_blank_reason_omitted(self, rejected_facts, reason):
        facts = rejected_facts.model_copy(update={"reason": reason})
        body = render(NotificationKind.BOOKING_REJECTED, facts)

        assert body == render(NotificationKind.BOOKING_REJECTED, rejected_facts)

    def test_amount_not_shown(self, approved_facts):
        body = render(NotificationKind.BOOKING_REJECTED, approved_facts)
        assert "Amount" not in body

    def test_accepts_kind_value(self, rejected_facts):
        assert render("booking_rejected", rejected_facts) == render(
            NotificationKind.BOOKING_REJECTED, rejected_facts
        )


class TestIncompleteFacts:
    """Test rendering when facts are missing or not text."""

    def test_missing_facts_render_blank(self):
        body = render(NotificationKind.BOOKING_APPROVED, BookingFacts())

        lines = body.splitlines()
        assert "📅 *Date:* " in lines
        assert "⏰ *Time:*  - " in lines
        assert "💰 *Amount:* ₹" in lines
        assert "None" not in body

    def test_scalar_facts_coerced_to_text(self):
        facts = BookingFacts(court_name=2, start_time=18, end_time=19, amount=500.5)

        body = render(NotificationKind.BOOKING_APPROVED, facts)

        assert "🎾 *Court:* 2" in body
        assert "⏰ *Time:* 18 - 19" in body
        assert "₹500.5" in body

    def test_non_date_value_kept_as_text(self):
        facts = BookingFacts(booking_date=12.5)
        assert "📅 *Date:* 12.5" in render(NotificationKind.BOOKING_REJECTED, facts)
