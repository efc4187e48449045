"""Test configuration and fixtures.

The app keeps all state in memory, so isolation only requires:
1. A fresh AuthState per test, injected through a dependency override
2. No simulated network delay
3. A reset rate limiter so the suite never trips the default limit
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.config.settings import settings
from src.features.auth.schemas import LoginFormData, SignUpFormData
from src.features.auth.state import AuthState, get_auth_state
from src.main import app, limiter


@pytest.fixture(autouse=True)
def no_network_delay(monkeypatch):
    """Make mock submissions resolve immediately."""
    monkeypatch.setattr(settings, "mock_network_delay_seconds", 0)


@pytest.fixture(autouse=True)
def reset_rate_limiter():
    limiter.reset()
    yield


@pytest.fixture
def auth_state() -> AuthState:
    """A fresh auth state, also used by the app for the duration of the test."""
    state = AuthState()
    app.dependency_overrides[get_auth_state] = lambda: state
    yield state
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(auth_state: AuthState) -> AsyncGenerator[AsyncClient]:
    """Create an async HTTP test client bound to the test's auth state."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


# Form Factories


@pytest.fixture
def make_signup_form():
    """Factory fixture for sign-up forms that pass validation unless overridden.

    Usage:
        form = make_signup_form()                       # valid
        form = make_signup_form(phone="12345")          # one bad field
    """

    def _factory(**overrides) -> SignUpFormData:
        data = {
            "name": "Jane Doe",
            "username": "jane_doe",
            "email": "jane@example.com",
            "phone": "+14155550123",
            "password": "Secure123!",
            "confirmPassword": "Secure123!",
        }
        data.update(overrides)
        return SignUpFormData(**data)

    return _factory


@pytest.fixture
def make_login_form():
    def _factory(username="jane_doe", password="anything") -> LoginFormData:
        return LoginFormData(username=username, password=password)

    return _factory
