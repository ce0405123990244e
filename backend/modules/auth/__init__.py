"""
Authentication module.

Handles email/password registration, sign-in and session tokens.

Public API:
- IAuthService: Interface for auth operations
- SessionUser: The signed-in user as returned to clients
- Auth exceptions: InvalidCredentialsError, InvalidTokenError, etc.
"""

from .interfaces import IAuthService
from .models import (
    RegisterRequest,
    SignInRequest,
    SessionUser,
    SessionResponse,
    SignInResponse,
    RegisterResponse,
    SessionTokenPayload,
)
from .exceptions import (
    InvalidCredentialsError,
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    AuthNotConfiguredError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "RegisterRequest",
    "SignInRequest",
    "SessionUser",
    "SessionResponse",
    "SignInResponse",
    "RegisterResponse",
    "SessionTokenPayload",
    # Exceptions
    "InvalidCredentialsError",
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "AuthNotConfiguredError",
]
