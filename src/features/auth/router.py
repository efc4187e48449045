"""Authentication router (login, sign-up and live form validation endpoints)."""

from fastapi import APIRouter, Depends, status

from src.shared.validators.forms import has_form_errors, validate_login_form, validate_signup_form

from .schemas import (
    AuthStateResponse,
    LoginFormData,
    LoginResponse,
    SignUpFormData,
    SignUpResponse,
    ValidationResponse,
)
from .service import AuthService
from .state import AuthState, get_auth_state

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=LoginResponse)
async def login(data: LoginFormData, state: AuthState = Depends(get_auth_state)):
    """Log in with any well-formed username and a non-empty password.

    - **username**: 3-20 letters, digits, underscores or hyphens
    - **password**: Required (strength is not checked at login)

    Field errors are returned with status 422 under ``detail.errors``.
    """
    return await AuthService.login(state, data)


@router.post("/signup", response_model=SignUpResponse, status_code=status.HTTP_201_CREATED)
async def sign_up(data: SignUpFormData, state: AuthState = Depends(get_auth_state)):
    """Register a new account.

    - **name**: Letters and spaces, at least 2 characters
    - **username**: 3-20 letters, digits, underscores or hyphens
    - **email**: Valid email address
    - **phone**: Country code format, e.g. +1234567890
    - **password**: 8+ characters with lowercase, uppercase and a digit, not containing the username
    - **confirmPassword**: Must match password

    Returns the one-time message to display on the login page.
    """
    return await AuthService.sign_up(state, data)


@router.post("/logout")
async def logout(state: AuthState = Depends(get_auth_state)):
    """Log out the current user."""
    AuthService.logout(state)
    return {"message": "Successfully logged out"}


@router.get("/state", response_model=AuthStateResponse)
async def get_state(state: AuthState = Depends(get_auth_state)):
    """Get the current authentication state."""
    return state.snapshot()


@router.post("/validate/login", response_model=ValidationResponse)
async def validate_login(data: LoginFormData):
    """Validate a login form without submitting it."""
    errors = validate_login_form(data)
    return ValidationResponse(valid=not has_form_errors(errors), errors=errors)


@router.post("/validate/signup", response_model=ValidationResponse)
async def validate_sign_up(data: SignUpFormData):
    """Validate a sign-up form without submitting it.

    Lets the client refresh a field's message as the user types.
    """
    errors = validate_signup_form(data)
    return ValidationResponse(valid=not has_form_errors(errors), errors=errors)
