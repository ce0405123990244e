"""
Users module.

Identity store and profile management.

Public API:
- IUserService: Interface for profile operations
- UserProfile: Public user record
- UpdateUserRequest: Editable profile fields
"""

from .interfaces import IUserService
from .models import UserProfile, UserCredentials, UpdateUserRequest, normalize_email
from .exceptions import (
    UserNotFoundError,
    UserAccessDeniedError,
    EmailAlreadyRegisteredError,
)

__all__ = [
    # Interface
    "IUserService",
    # Models
    "UserProfile",
    "UserCredentials",
    "UpdateUserRequest",
    "normalize_email",
    # Exceptions
    "UserNotFoundError",
    "UserAccessDeniedError",
    "EmailAlreadyRegisteredError",
]
