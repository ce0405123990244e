"""
Base exception classes for the COI Tracker backend.

Each module should define its own exceptions that inherit from these bases.
The API layer maps each base class to an HTTP status code, so a module
exception only has to pick the right parent.
"""

from typing import Optional, Any


class CoiError(Exception):
    """
    Base exception for all COI Tracker errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(CoiError):
    """Resource not found."""

    pass


class ValidationError(CoiError):
    """Input validation failed."""

    pass


class AuthenticationError(CoiError):
    """Authentication failed (invalid or missing credentials)."""

    pass


class AuthorizationError(CoiError):
    """Authorization failed (resource belongs to someone else)."""

    pass


class ConflictError(CoiError):
    """A uniqueness constraint was violated."""

    pass
