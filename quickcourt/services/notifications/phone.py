"""
Recipient Phone Normalization

Turns whatever the user typed into their profile into a canonical
"+<country code><number>" address. Normalization never fails; numbers
that fit none of the Indian patterns are passed through with a "+" so
the provider can make the final call.
"""

import re
from typing import Optional

INDIA_COUNTRY_CODE = "91"

_NON_DIGITS = re.compile(r"[^0-9]")
_CANONICAL = re.compile(r"^\+[0-9]+$")


def normalize_phone_number(
    raw: Optional[str],
    default_country_code: str = INDIA_COUNTRY_CODE,
) -> str:
    """
    Normalize a raw phone number to canonical international form.

    Rules, first match wins:
        1. Already country coded ("91..."): "+" + digits
        2. Bare 10-digit local number: "+<default code>" + digits
        3. Trunk-prefixed 11-digit number ("0..."): drop the "0", then as 2
        4. Anything else: "+" + digits

    Args:
        raw: Phone number in any format, e.g. "(987) 654-3210"
        default_country_code: Code assumed for local numbers

    Returns:
        str: Canonical address. Input with no digits yields "+".

    Example:
        >>> normalize_phone_number("098765 43210")
        '+919876543210'
    """
    digits = _NON_DIGITS.sub("", raw) if isinstance(raw, str) else ""

    if digits.startswith(INDIA_COUNTRY_CODE):
        return f"+{digits}"

    if len(digits) == 10:
        return f"+{default_country_code}{digits}"

    if digits.startswith("0") and len(digits) == 11:
        return f"+{default_country_code}{digits[1:]}"

    return f"+{digits}"


def is_deliverable_address(address: str) -> bool:
    """Check that a canonical address carries at least one digit."""
    return bool(address) and _CANONICAL.match(address) is not None
