"""Username validation functions."""

import re

USERNAME_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 20


def validate_username(username: str) -> str | None:
    """Validate username format.

    Requirements:
    - Not blank
    - Letters, digits, underscores and hyphens only
    - Between 3 and 20 characters

    Args:
        username: Username to validate

    Returns:
        The first failing rule's message, or None if the username is valid

    Examples:
        >>> validate_username("jane_doe") is None
        True
        >>> validate_username("ab")
        'Username must be at least 3 characters long'

    """
    if not username.strip():
        return "Username is required"
    if not USERNAME_PATTERN.fullmatch(username):
        return "Username can only contain letters, numbers, underscores, and hyphens"
    if len(username) < USERNAME_MIN_LENGTH:
        return f"Username must be at least {USERNAME_MIN_LENGTH} characters long"
    if len(username) > USERNAME_MAX_LENGTH:
        return f"Username must be at most {USERNAME_MAX_LENGTH} characters long"
    return None
