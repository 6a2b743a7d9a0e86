"""Tests for recipient phone normalization."""

import pytest

from quickcourt.services.notifications.phone import (
    is_deliverable_address,
    normalize_phone_number,
)


class TestNormalizePhoneNumber:
    """Test the ordered normalization rules."""

    @pytest.mark.parametrize("digits", ["9876543210", "1234567890", "5550001111"])
    def test_ten_digits_get_india_code(self, digits):
        assert normalize_phone_number(digits) == f"+91{digits}"

    @pytest.mark.parametrize("raw", ["919876543210", "+91 98765 43210", "91-12", "91"])
    def test_already_country_coded(self, raw):
        digits = "".join(c for c in raw if c.isdigit())
        assert normalize_phone_number(raw) == f"+{digits}"

    def test_ten_digits_starting_with_91_are_treated_as_coded(self):
        """The country-code check runs before the length check."""
        assert normalize_phone_number("9123456789") == "+9123456789"

    def test_trunk_prefix_dropped(self):
        assert normalize_phone_number("09876543210") == "+919876543210"
        assert normalize_phone_number("098765-43210") == "+919876543210"

    def test_punctuation_stripped(self):
        assert normalize_phone_number("(987) 654-3210") == "+919876543210"

    def test_other_lengths_get_plus_only(self):
        assert normalize_phone_number("+1 415 523 8886") == "+14155238886"
        assert normalize_phone_number("12345") == "+12345"
        assert normalize_phone_number("0123456789012") == "+0123456789012"

    @pytest.mark.parametrize("raw", ["", "   ", "abc", "+", "---", None])
    def test_no_digits_yields_bare_plus(self, raw):
        assert normalize_phone_number(raw) == "+"

    @pytest.mark.parametrize(
        "raw",
        ["", "x", "+44 20 7946 0958", "(987) 654-3210", "0" * 30, "١٢٣"],
    )
    def test_never_raises_and_starts_with_plus(self, raw):
        result = normalize_phone_number(raw)
        assert result.startswith("+")

    def test_configurable_default_country_code(self):
        assert normalize_phone_number("4155238886", default_country_code="1") == "+14155238886"
        assert normalize_phone_number("04155238886", default_country_code="1") == "+14155238886"

    def test_deterministic(self):
        assert normalize_phone_number("98765 43210") == normalize_phone_number("98765 43210")


class TestIsDeliverableAddress:
    """Test canonical address usability check."""

    def test_canonical_address(self):
        assert is_deliverable_address("+919876543210")

    @pytest.mark.parametrize("address", ["", "+", "919876543210", "+91 98765", "whatsapp:+91"])
    def test_unusable_addresses(self, address):
        assert not is_deliverable_address(address)
