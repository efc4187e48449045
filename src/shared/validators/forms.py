"""Whole-form validation for the login and sign-up forms.

Each field is checked independently by its own validator. The only cross-field
rules are password vs. username (the password may not contain the username)
and confirmation vs. password (they must match). The result is a sparse
mapping: a field appears only when it failed, keyed by the field name the form
submits.
"""

from src.features.auth.schemas import FormErrors, LoginFormData, SignUpFormData

from .email import validate_email
from .name import validate_name
from .password import PASSWORD_REQUIRED_MESSAGE, validate_confirm_password, validate_password
from .phone import validate_phone
from .username import validate_username


def _collect(checks: dict[str, str | None]) -> FormErrors:
    return {field: message for field, message in checks.items() if message}


def validate_login_form(data: LoginFormData) -> FormErrors:
    """Validate a login submission.

    Only the username format is enforced at login; the password just has to be
    present, strength rules apply at sign-up.
    """
    return _collect(
        {
            "username": validate_username(data.username),
            "password": None if data.password else PASSWORD_REQUIRED_MESSAGE,
        }
    )


def validate_signup_form(data: SignUpFormData) -> FormErrors:
    """Validate all six sign-up fields, including the cross-field rules."""
    return _collect(
        {
            "name": validate_name(data.name),
            "username": validate_username(data.username),
            "email": validate_email(data.email),
            "phone": validate_phone(data.phone),
            "password": validate_password(data.password, data.username),
            "confirmPassword": validate_confirm_password(data.confirm_password, data.password),
        }
    )


def has_form_errors(errors: FormErrors) -> bool:
    """Return True if any field failed validation."""
    return len(errors) > 0
