import pytest

from quickcourt.core.config import GatewayCredentials, get_settings
from quickcourt.schemas import BookingFacts
from quickcourt.services.notifications import reset_notification_service

TWILIO_ENV_VARS = [
    "ENV_MODE",
    "DEBUG",
    "TWILIO_ACCOUNT_SID",
    "TWILIO_AUTH_TOKEN",
    "TWILIO_WHATSAPP_FROM",
    "DEFAULT_COUNTRY_CODE",
    "NOTIFICATION_SIGN_OFF",
]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Isolate every test from the host environment and cached singletons."""
    monkeypatch.chdir(tmp_path)
    for var in TWILIO_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    reset_notification_service()
    yield
    get_settings.cache_clear()
    reset_notification_service()


@pytest.fixture
def credentials():
    return GatewayCredentials(
        account_sid="ACtest1234567890",
        auth_token="test_token",
        from_number="+14155238886",
    )


@pytest.fixture
def approved_facts():
    return BookingFacts(
        user_name="Asha",
        facility_name="City Arena",
        court_name="Court 2",
        booking_date="2026-01-05",
        start_time="18:00",
        end_time="19:00",
        amount="500",
    )


@pytest.fixture
def rejected_facts():
    return BookingFacts(
        user_name="Asha",
        facility_name="City Arena",
        court_name="Court 2",
        booking_date="2026-01-05",
        start_time="18:00",
        end_time="19:00",
    )
