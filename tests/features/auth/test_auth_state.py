"""Tests for the in-memory auth state container."""

from src.features.auth.schemas import UserProfile
from src.features.auth.state import AuthState, get_auth_state


def _profile(username="jane_doe") -> UserProfile:
    return UserProfile(name="Jane Doe", username=username, email="jane@example.com")


class TestAuthState:
    def test_initial_state(self):
        state = AuthState()
        assert state.user is None
        assert state.is_authenticated is False
        assert state.is_loading is False

    def test_login_start_sets_loading(self):
        state = AuthState()
        state.login_start()
        assert state.is_loading is True
        assert state.is_authenticated is False

    def test_login_success(self):
        state = AuthState()
        state.login_start()
        state.login_success(_profile())
        assert state.is_loading is False
        assert state.is_authenticated is True
        assert state.user.username == "jane_doe"

    def test_login_failure_clears_user(self):
        state = AuthState()
        state.login_success(_profile())
        state.login_start()
        state.login_failure()
        assert state.user is None
        assert state.is_authenticated is False
        assert state.is_loading is False

    def test_sign_up_success_does_not_authenticate(self):
        state = AuthState()
        state.sign_up_success(_profile())
        assert state.user == _profile()
        assert state.is_authenticated is False
        assert state.is_loading is False

    def test_logout_resets_everything(self):
        state = AuthState()
        state.login_success(_profile())
        state.logout()
        assert state.user is None
        assert state.is_authenticated is False
        assert state.is_loading is False

    def test_snapshot_is_detached(self):
        state = AuthState()
        state.login_success(_profile())
        snapshot = state.snapshot()
        state.logout()
        assert snapshot.is_authenticated is True
        assert snapshot.user.username == "jane_doe"

    def test_dependency_returns_shared_instance(self):
        assert get_auth_state() is get_auth_state()
