"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import pytest
from datetime import datetime, timezone, timedelta
import jwt  # PyJWT

# Load the app first so route modules and api.middleware import in order
from api.app import create_app  # noqa: F401
from api.dependencies import reset_container
from shared.config import get_settings
from shared.database import reset_client_cache


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"
TEST_ISSUER = "coi-tracker"


def create_test_token(
    user_id: str = "test-user-123",
    email: str = "test@example.com",
    expired: bool = False,
    issuer: str = TEST_ISSUER,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a session token for authentication in tests.

    Args:
        user_id: User ID to include in the token
        email: Email to include in the token
        expired: If True, creates an expired token
        issuer: Token issuer claim
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)

    payload = {
        "sub": user_id,
        "email": email,
        "iss": issuer,
        "exp": int(exp.timestamp()),
        "iat": int(now.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Configure a signing secret and fresh singletons for every test."""
    monkeypatch.setenv("COI_AUTH_SECRET", TEST_JWT_SECRET)
    monkeypatch.setenv("COI_FRONTEND_URL", "http://localhost:5173")
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()
    yield get_settings()
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()


@pytest.fixture
def test_user_id() -> str:
    """Provide a consistent test user ID."""
    return "test-user-123"


@pytest.fixture
def test_user_email() -> str:
    """Provide a consistent test user email."""
    return "test@example.com"


@pytest.fixture
def auth_token(test_user_id: str, test_user_email: str) -> str:
    """Create a valid auth token for testing."""
    return create_test_token(user_id=test_user_id, email=test_user_email)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return {"Authorization": f"Bearer {auth_token}"}
