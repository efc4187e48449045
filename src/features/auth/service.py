"""Authentication service layer (mock, in-memory)."""

import asyncio
import logging

from src.config.settings import settings
from src.shared.validators.forms import has_form_errors, validate_login_form, validate_signup_form

from .exceptions import FormValidationException, LoginFailedException
from .schemas import LoginFormData, LoginResponse, SignUpFormData, SignUpResponse, UserProfile
from .state import AuthState

logger = logging.getLogger(__name__)

DEMO_USER_NAME = "Demo User"
DEMO_USER_EMAIL = "user@example.com"
SIGN_UP_SUCCESS_MESSAGE = "Account created successfully! Please sign in with any username/password."


async def simulate_network_delay() -> None:
    """Pretend to talk to a backend."""
    await asyncio.sleep(settings.mock_network_delay_seconds)


class AuthService:
    """Service for the demo login/sign-up flows.

    No credentials are checked against anything: any well-formed login
    succeeds and any valid sign-up is accepted.
    """

    @staticmethod
    async def login(state: AuthState, data: LoginFormData) -> LoginResponse:
        """Validate the login form and sign the user in.

        Args:
            state: Auth state to update
            data: Submitted login form

        Returns:
            LoginResponse with a welcome message and the demo profile

        Raises:
            FormValidationException: If any field is invalid (state untouched)
            LoginFailedException: If the credentials are empty after validation

        """
        errors = validate_login_form(data)
        if has_form_errors(errors):
            logger.info(f"Login form rejected: {', '.join(sorted(errors))}")
            raise FormValidationException(errors)

        state.login_start()
        await simulate_network_delay()

        if not (data.username and data.password):
            state.login_failure()
            logger.warning("Login failed: missing credentials")
            raise LoginFailedException()

        user = UserProfile(name=DEMO_USER_NAME, username=data.username, email=DEMO_USER_EMAIL)
        state.login_success(user)

        logger.info(f"User logged in: {data.username}")
        return LoginResponse(message=f"Welcome {data.username}! Login successful.", user=user)

    @staticmethod
    async def sign_up(state: AuthState, data: SignUpFormData) -> SignUpResponse:
        """Validate the sign-up form and register the profile.

        The new user is not logged in; the returned message is meant for the
        login page the client redirects to.
        """
        errors = validate_signup_form(data)
        if has_form_errors(errors):
            logger.info(f"Sign-up form rejected: {', '.join(sorted(errors))}")
            raise FormValidationException(errors)

        await simulate_network_delay()

        user = UserProfile(name=data.name, username=data.username, email=data.email)
        state.sign_up_success(user)

        logger.info(f"User signed up: {data.username}")
        return SignUpResponse(message=SIGN_UP_SUCCESS_MESSAGE, user=user)

    @staticmethod
    def logout(state: AuthState) -> None:
        """Clear the current user."""
        username = state.user.username if state.user else None
        state.logout()
        logger.info(f"User logged out: {username}")
