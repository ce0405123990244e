"""
Users module exceptions.
"""

from shared.exceptions import NotFoundError, AuthorizationError, ConflictError


class UserNotFoundError(NotFoundError):
    """Raised when a user does not exist."""

    def __init__(self, user_id: str):
        super().__init__(
            f"User not found: {user_id}",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class UserAccessDeniedError(AuthorizationError):
    """Raised when a user tries to modify someone else's profile."""

    def __init__(self, target_user_id: str, user_id: str):
        super().__init__(
            "You can only modify your own profile",
            code="USER_ACCESS_DENIED",
            details={"target_user_id": target_user_id, "user_id": user_id},
        )


class EmailAlreadyRegisteredError(ConflictError):
    """Raised when registering an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(
            "User already exists",
            code="EMAIL_ALREADY_REGISTERED",
            details={"email": email},
        )
