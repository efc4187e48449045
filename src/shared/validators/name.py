"""Name validation functions."""

import re

NAME_PATTERN = re.compile(r"[A-Za-z\s]+")
NAME_MIN_LENGTH = 2


def validate_name(name: str) -> str | None:
    """Validate a person's display name.

    Rules, checked in order:
    - Required (blank after trimming is rejected)
    - Only letters and whitespace
    - At least 2 characters once trimmed

    Args:
        name: Raw name as typed in the form

    Returns:
        An error message, or None if the name is valid

    Examples:
        >>> validate_name("Ada Lovelace") is None
        True
        >>> validate_name("R2D2")
        'Name must contain only alphabets and spaces'

    """
    if not name.strip():
        return "Name is required"
    if not NAME_PATTERN.fullmatch(name):
        return "Name must contain only alphabets and spaces"
    if len(name.strip()) < NAME_MIN_LENGTH:
        return f"Name must be at least {NAME_MIN_LENGTH} characters long"
    return None
