"""In-memory authentication state.

The demo has no user store: whoever logs in last is "the" user of the process.
The state lives in a single object mutated only from the event loop and is
lost on restart.
"""

from .schemas import AuthStateResponse, UserProfile


class AuthState:
    """Authentication state container with the login/sign-up actions."""

    def __init__(self):
        self.user: UserProfile | None = None
        self.is_authenticated = False
        self.is_loading = False

    def login_start(self) -> None:
        self.is_loading = True

    def login_success(self, user: UserProfile) -> None:
        self.is_loading = False
        self.is_authenticated = True
        self.user = user

    def login_failure(self) -> None:
        self.is_loading = False
        self.is_authenticated = False
        self.user = None

    def sign_up_success(self, user: UserProfile) -> None:
        """Remember the registered profile without authenticating it.

        The client is expected to send the user to the login form next.
        """
        self.is_loading = False
        self.user = user

    def logout(self) -> None:
        self.user = None
        self.is_authenticated = False
        self.is_loading = False

    def snapshot(self) -> AuthStateResponse:
        """Return a copy of the current state safe to serialize."""
        return AuthStateResponse(
            user=self.user.model_copy() if self.user else None,
            is_authenticated=self.is_authenticated,
            is_loading=self.is_loading,
        )


_auth_state = AuthState()


def get_auth_state() -> AuthState:
    """FastAPI dependency returning the process-wide auth state."""
    return _auth_state
