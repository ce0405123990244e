"""
Authentication service implementation.

Email/password registration and sign-in against the users table, and
session tokens signed with the configured secret.
"""

import logging
from typing import Optional

from shared.clock import Clock, utcnow
from shared.config import Settings
from shared.models import AuthenticatedUser
from modules.users.exceptions import EmailAlreadyRegisteredError
from modules.users.models import UserProfile, normalize_email
from modules.users.repository import UserRepository

from .interfaces import IAuthService
from .models import RegisterRequest, SessionUser
from .passwords import hash_password, verify_password
from .tokens import encode_session_token, decode_session_token, user_from_payload
from .exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Passwords are hashed with passlib; sessions are stateless JWTs.
    """

    def __init__(self, users: UserRepository, settings: Settings, clock: Clock = utcnow):
        self._users = users
        self._settings = settings
        self._clock = clock

    async def register(self, request: RegisterRequest) -> UserProfile:
        email = normalize_email(request.email)

        if self._users.get_by_email(email) is not None:
            raise EmailAlreadyRegisteredError(email)

        # A concurrent registration still surfaces as a conflict from the store
        user = self._users.create(
            email=email,
            password_hash=hash_password(request.password),
            name=request.name,
        )
        logger.info(f"Registered user {user.id}")
        return user

    async def authenticate(self, email: str, password: str) -> SessionUser:
        credentials = self._users.get_credentials_by_email(email)

        if credentials is None or not credentials.password_hash:
            logger.info("Sign-in failed: unknown email or no password set")
            raise InvalidCredentialsError()

        if not verify_password(password, credentials.password_hash):
            logger.info(f"Sign-in failed for user {credentials.id}: wrong password")
            raise InvalidCredentialsError()

        return SessionUser(id=credentials.id, email=credentials.email, name=credentials.name)

    def issue_session_token(self, user: SessionUser) -> str:
        return encode_session_token(user.id, user.email, self._settings, now=self._clock())

    async def validate_token(self, token: str) -> AuthenticatedUser:
        payload = decode_session_token(token, self._settings)
        return user_from_payload(payload)

    async def get_session_user(self, user_id: str) -> Optional[SessionUser]:
        profile = self._users.get_by_id(user_id)
        if profile is None:
            return None
        return SessionUser(id=profile.id, email=profile.email, name=profile.name)
