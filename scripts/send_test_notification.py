"""
WhatsApp Test Notification Script

Renders a booking decision message and sends it through the configured
gateway, so Twilio credentials and the WhatsApp sender can be checked
end to end before real bookings depend on them.

Run from project root:
    python scripts/send_test_notification.py --phone 9876543210
    python scripts/send_test_notification.py --phone 9876543210 --rejected --reason "Court maintenance"
    python scripts/send_test_notification.py --phone 9876543210 --dry-run
"""

import argparse
import asyncio
import os
import sys
from datetime import date

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from quickcourt.core.config import get_settings, setup_logging
from quickcourt.schemas import BookingFacts, NotificationKind, NotificationRequest
from quickcourt.services.notifications import (
    get_notification_service,
    normalize_phone_number,
    render,
)


def build_facts(args: argparse.Namespace) -> BookingFacts:
    return BookingFacts(
        user_name=args.name,
        facility_name=args.facility,
        court_name=args.court,
        booking_date=args.date,
        start_time=args.start,
        end_time=args.end,
        amount=args.amount,
        reason=args.reason,
    )


async def send(request: NotificationRequest) -> bool:
    notifications = get_notification_service()

    print(f"📡 Gateway: {notifications.provider_name}")
    if not notifications.is_available():
        print("⚠️ Gateway not available - check TWILIO_* settings")

    result = await notifications.notify(request)

    if result.success:
        print(f"✅ Sent (ID: {result.message_id})")
    else:
        print(f"❌ Not sent: {result.failure.value if result.failure else 'unknown'}")
        if result.error_code:
            print(f"   Error code: {result.error_code}")
        if result.error_message:
            print(f"   {result.error_message}")
    return result.success


def main() -> int:
    parser = argparse.ArgumentParser(description="Send a test booking notification over WhatsApp")
    parser.add_argument("--phone", required=True, help="Recipient phone number, any format")
    parser.add_argument("--rejected", action="store_true", help="Send a rejection instead of an approval")
    parser.add_argument("--reason", default=None, help="Rejection reason")
    parser.add_argument("--name", default="Test User", help="User name")
    parser.add_argument("--facility", default="City Arena", help="Facility name")
    parser.add_argument("--court", default="Court 1", help="Court name")
    parser.add_argument("--date", default=date.today().isoformat(), help="Booking date (YYYY-MM-DD)")
    parser.add_argument("--start", default="18:00", help="Start time")
    parser.add_argument("--end", default="19:00", help="End time")
    parser.add_argument("--amount", default="500", help="Booking amount")
    parser.add_argument("--dry-run", action="store_true", help="Print the message without sending")
    args = parser.parse_args()

    setup_logging()
    settings = get_settings()

    kind = NotificationKind.BOOKING_REJECTED if args.rejected else NotificationKind.BOOKING_APPROVED
    request = NotificationRequest(kind=kind, recipient_raw=args.phone, facts=build_facts(args))
    to = normalize_phone_number(args.phone, default_country_code=settings.default_country_code)

    print("=" * 60)
    print(f"📱 To: {to}")
    print(f"📨 Kind: {kind.value}")
    print("=" * 60)
    print(render(kind, request.facts, sign_off=settings.notification_sign_off))
    print("=" * 60)

    if args.dry_run:
        return 0

    return 0 if asyncio.run(send(request)) else 1


if __name__ == "__main__":
    sys.exit(main())
