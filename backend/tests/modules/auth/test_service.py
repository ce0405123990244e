"""Tests for the auth service."""

import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock

from modules.auth.interfaces import IAuthService
from modules.auth.models import RegisterRequest, SessionUser
from modules.auth.passwords import hash_password, verify_password
from modules.auth.service import AuthService
from modules.auth.exceptions import InvalidCredentialsError, InvalidTokenError
from modules.users.exceptions import EmailAlreadyRegisteredError
from modules.users.models import UserProfile, UserCredentials
from modules.users.repository import UserRepository
from shared.config import Settings

from tests.conftest import TEST_JWT_SECRET


NOW = datetime(2025, 6, 15, 12, 0, tzinfo=timezone.utc)


def make_profile(**overrides) -> UserProfile:
    data = {
        "id": "user-123",
        "email": "jane@example.com",
        "name": "Jane",
        "created_at": NOW,
        "updated_at": NOW,
    }
    data.update(overrides)
    return UserProfile(**data)


@pytest.fixture
def users():
    return MagicMock(spec=UserRepository)


@pytest.fixture
def service(users):
    return AuthService(
        users=users,
        settings=Settings(auth_secret=TEST_JWT_SECRET),
        clock=lambda: datetime.now(timezone.utc),
    )


class TestInterface:
    def test_implements_interface(self, service):
        assert isinstance(service, IAuthService)


class TestRegister:
    @pytest.mark.asyncio
    async def test_register_hashes_password(self, service, users):
        users.get_by_email.return_value = None
        users.create.return_value = make_profile()

        user = await service.register(
            RegisterRequest(email="Jane@Example.com", password="s3cret!", name="Jane")
        )

        assert user.id == "user-123"
        kwargs = users.create.call_args.kwargs
        assert kwargs["email"] == "jane@example.com"
        assert kwargs["password_hash"] != "s3cret!"
        assert verify_password("s3cret!", kwargs["password_hash"])

    @pytest.mark.asyncio
    async def test_register_existing_email(self, service, users):
        users.get_by_email.return_value = make_profile()

        with pytest.raises(EmailAlreadyRegisteredError) as exc_info:
            await service.register(RegisterRequest(email="jane@example.com", password="pw"))

        assert exc_info.value.message == "User already exists"
        users.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_race_surfaces_conflict(self, service, users):
        users.get_by_email.return_value = None
        users.create.side_effect = EmailAlreadyRegisteredError("jane@example.com")

        with pytest.raises(EmailAlreadyRegisteredError):
            await service.register(RegisterRequest(email="jane@example.com", password="pw"))


class TestAuthenticate:
    @pytest.mark.asyncio
    async def test_correct_password(self, service, users):
        users.get_credentials_by_email.return_value = UserCredentials(
            id="user-123",
            email="jane@example.com",
            name="Jane",
            password_hash=hash_password("s3cret!"),
            created_at=NOW,
        )

        user = await service.authenticate("jane@example.com", "s3cret!")

        assert user == SessionUser(id="user-123", email="jane@example.com", name="Jane")

    @pytest.mark.asyncio
    async def test_wrong_password(self, service, users):
        users.get_credentials_by_email.return_value = UserCredentials(
            id="user-123",
            email="jane@example.com",
            password_hash=hash_password("s3cret!"),
            created_at=NOW,
        )

        with pytest.raises(InvalidCredentialsError):
            await service.authenticate("jane@example.com", "wrong")

    @pytest.mark.asyncio
    async def test_unknown_email(self, service, users):
        users.get_credentials_by_email.return_value = None

        with pytest.raises(InvalidCredentialsError):
            await service.authenticate("nobody@example.com", "pw")

    @pytest.mark.asyncio
    async def test_user_without_password(self, service, users):
        users.get_credentials_by_email.return_value = UserCredentials(
            id="user-123", email="jane@example.com", password_hash=None, created_at=NOW
        )

        with pytest.raises(InvalidCredentialsError):
            await service.authenticate("jane@example.com", "pw")


class TestSessionTokens:
    @pytest.mark.asyncio
    async def test_issued_token_validates(self, service):
        token = service.issue_session_token(
            SessionUser(id="user-123", email="jane@example.com")
        )

        user = await service.validate_token(token)

        assert user.id == "user-123"
        assert user.email == "jane@example.com"

    @pytest.mark.asyncio
    async def test_tampered_token_rejected(self, service):
        token = service.issue_session_token(SessionUser(id="user-123", email="jane@example.com"))

        with pytest.raises(InvalidTokenError):
            await service.validate_token(token[:-2] + "xx")


class TestGetSessionUser:
    @pytest.mark.asyncio
    async def test_existing_user(self, service, users):
        users.get_by_id.return_value = make_profile()

        user = await service.get_session_user("user-123")

        assert user.email == "jane@example.com"

    @pytest.mark.asyncio
    async def test_deleted_user(self, service, users):
        users.get_by_id.return_value = None

        assert await service.get_session_user("user-123") is None
