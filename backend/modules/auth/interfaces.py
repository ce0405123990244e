"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
from modules.users.models import UserProfile

from .models import RegisterRequest, SessionUser


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def register(self, request: RegisterRequest) -> UserProfile:
        """
        Register a new user with an email and password.

        Args:
            request: Email, password and optional display name

        Returns:
            The created user's profile

        Raises:
            EmailAlreadyRegisteredError: If the email is already taken
        """
        ...

    async def authenticate(self, email: str, password: str) -> SessionUser:
        """
        Check email/password credentials.

        Raises:
            InvalidCredentialsError: Unknown email or wrong password
        """
        ...

    def issue_session_token(self, user: SessionUser) -> str:
        """Create a signed session token for a user."""
        ...

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Validate a session token and return the authenticated user.

        Raises:
            AuthenticationError: If token is missing, invalid or expired
        """
        ...

    async def get_session_user(self, user_id: str) -> Optional[SessionUser]:
        """
        Reload the session's user from the store.

        Returns:
            SessionUser, or None if the user no longer exists
        """
        ...
