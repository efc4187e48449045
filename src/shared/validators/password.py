"""Password validation functions."""

import re

PASSWORD_MIN_LENGTH = 8
PASSWORD_SPECIAL_CHARACTERS = "@#$%^&+=!"
PASSWORD_PATTERN = re.compile(r"[A-Za-z0-9@#$%^&+=!]*")
PASSWORD_REQUIRED_MESSAGE = "Password is required"


def validate_password(password: str, username: str | None = None) -> str | None:
    """Validate password strength requirements.

    Requirements, checked in order:
    - Not empty (passwords are never trimmed)
    - At least 8 characters
    - Only letters, digits and the special characters ``@#$%^&+=!``
    - At least one lowercase letter (a-z)
    - At least one uppercase letter (A-Z)
    - At least one digit (0-9)
    - Does not contain the username, ignoring case

    Args:
        password: Password string to validate
        username: Username entered on the same form, if any

    Returns:
        The message of the first requirement that fails, or None

    Examples:
        >>> validate_password("SecurePass123") is None
        True
        >>> validate_password("securepass123")
        'Password must contain at least one uppercase letter'
        >>> validate_password("Janedoe123", username="JaneDoe")
        'Password cannot contain your username'

    """
    if not password:
        return PASSWORD_REQUIRED_MESSAGE
    if len(password) < PASSWORD_MIN_LENGTH:
        return f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
    if not PASSWORD_PATTERN.fullmatch(password):
        return f"Password can only contain letters, numbers, and special characters ({PASSWORD_SPECIAL_CHARACTERS})"
    if not re.search(r"[a-z]", password):
        return "Password must contain at least one lowercase letter"
    if not re.search(r"[A-Z]", password):
        return "Password must contain at least one uppercase letter"
    if not re.search(r"[0-9]", password):
        return "Password must contain at least one number"
    if username and username.lower() in password.lower():
        return "Password cannot contain your username"
    return None


def validate_confirm_password(confirm_password: str, password: str) -> str | None:
    """Validate that the confirmation repeats the password exactly."""
    if not confirm_password:
        return "Please confirm your password"
    if confirm_password != password:
        return "Passwords do not match"
    return None
