"""Authentication exceptions."""

from fastapi import HTTPException, status

from .schemas import FormErrors


class FormValidationException(HTTPException):
    """Raised when a submitted form has one or more invalid fields.

    The response detail carries the per-field messages so the client can show
    each one next to its input.
    """

    def __init__(self, errors: FormErrors, detail: str = "Form validation failed"):
        self.errors = errors
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
            detail={"message": detail, "errors": errors},
        )


class AuthenticationException(HTTPException):
    """Base authentication exception."""

    def __init__(self, detail: str = "Authentication failed"):
        super().__init__(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


class LoginFailedException(AuthenticationException):
    """Raised when the mock login rejects the submitted credentials."""

    def __init__(self):
        super().__init__(detail="Please enter both username and password.")
