"""Email validation functions."""

import re

# local@domain.tld, TLD of two or more letters
EMAIL_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


def validate_email(email: str) -> str | None:
    """Validate email address shape (not deliverability)."""
    if not email.strip():
        return "Email is required"
    if not EMAIL_PATTERN.fullmatch(email):
        return "Please enter a valid email address"
    return None
