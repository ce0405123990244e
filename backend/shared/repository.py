"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the translation of store errors into domain
exceptions.
"""

from datetime import datetime, timezone
from typing import TypeVar, Generic, Optional

from postgrest.exceptions import APIError
from supabase import Client

from .database import UNIQUE_VIOLATION
from .exceptions import ConflictError


T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints
    - Unique-violation translation via _raise_conflict_or_reraise

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Example:
        class UserRepository(BaseRepository[UserProfile]):
            def get_by_id(self, user_id: str) -> Optional[UserProfile]:
                result = self._db.table("users").select("*").eq("id", user_id).execute()
                if not result.data:
                    return None
                return self._map_to_profile(result.data[0])
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    @staticmethod
    def _now_iso() -> str:
        """Current UTC time as an ISO-8601 string for timestamp columns."""
        return datetime.now(timezone.utc).isoformat()

    @staticmethod
    def _first(data: Optional[list[dict]]) -> Optional[dict]:
        """Return the first row of a result set, or None."""
        if not data:
            return None
        return data[0]

    @staticmethod
    def _raise_conflict_or_reraise(error: APIError, message: str) -> None:
        """
        Translate a PostgREST unique violation into a ConflictError.

        Any other APIError is re-raised unchanged.
        """
        if error.code == UNIQUE_VIOLATION:
            raise ConflictError(message, code="CONFLICT") from error
        raise error
