"""Authentication schemas (DTOs)."""

from pydantic import BaseModel, ConfigDict, Field

# Field name -> message, only for fields that failed
FormErrors = dict[str, str]


# Request schemas
class LoginFormData(BaseModel):
    """Login form submission.

    Fields default to empty strings so that a missing field is reported by the
    form validators as "required" rather than rejected by schema parsing.
    """

    username: str = ""
    password: str = ""


class SignUpFormData(BaseModel):
    """Sign-up form submission.

    Accepts ``confirmPassword`` (as the browser form submits it) or
    ``confirm_password``.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    username: str = ""
    email: str = ""
    phone: str = ""
    password: str = ""
    confirm_password: str = Field("", alias="confirmPassword")


# Response schemas
class UserProfile(BaseModel):
    """Public profile of the signed-in (or just registered) user."""

    name: str
    username: str
    email: str


class AuthStateResponse(BaseModel):
    """Snapshot of the in-memory authentication state."""

    user: UserProfile | None = None
    is_authenticated: bool = False
    is_loading: bool = False


class LoginResponse(BaseModel):
    """Successful login response."""

    message: str
    user: UserProfile


class SignUpResponse(BaseModel):
    """Successful sign-up response.

    ``message`` is meant to be shown once on the login page that the client
    redirects to.
    """

    message: str
    redirect_to: str = "/login"
    user: UserProfile


class ValidationResponse(BaseModel):
    """Result of validating a form without submitting it."""

    valid: bool
    errors: FormErrors = Field(default_factory=dict)
