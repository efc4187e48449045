"""Phone number validation functions."""

import re

# Leading "+", first digit 1-9, 2 to 15 digits in total
PHONE_PATTERN = re.compile(r"\+[1-9][0-9]{1,14}")


def validate_phone(phone: str) -> str | None:
    """Validate a phone number written with its country code.

    The accepted shape is E.164-like: ``+`` followed by 2 to 15 digits, the
    first of which is not zero. Separators such as spaces or dashes are
    rejected.

    Args:
        phone: Phone number to validate, e.g. ``+14155550123``

    Returns:
        An error message, or None if the phone number is valid

    """
    if not phone.strip():
        return "Phone number is required"
    if not PHONE_PATTERN.fullmatch(phone):
        return "Please enter a valid phone number with country code (e.g., +1234567890)"
    return None
