"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the users table.
"""

from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.database import UNIQUE_VIOLATION
from shared.repository import BaseRepository
from .exceptions import EmailAlreadyRegisteredError
from .models import UserProfile, UserCredentials, normalize_email


PROFILE_COLUMNS = "id, email, name, image, email_verified, created_at, updated_at"


class UserRepository(BaseRepository[UserProfile]):
    """
    Repository for user data access.

    Profile reads never select the password hash; only
    get_credentials_by_email does, for sign-in.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying ownership.
    """

    def get_by_id(self, user_id: str) -> Optional[UserProfile]:
        """Get a user profile by ID."""
        result = self._db.table("users").select(PROFILE_COLUMNS).eq("id", user_id).execute()
        row = self._first(result.data)
        return self._map_to_profile(row) if row else None

    def get_by_email(self, email: str) -> Optional[UserProfile]:
        """Get a user profile by email (normalized before lookup)."""
        result = (
            self._db.table("users")
            .select(PROFILE_COLUMNS)
            .eq("email", normalize_email(email))
            .execute()
        )
        row = self._first(result.data)
        return self._map_to_profile(row) if row else None

    def get_credentials_by_email(self, email: str) -> Optional[UserCredentials]:
        """Get a user with password hash by email, for sign-in."""
        result = (
            self._db.table("users")
            .select("id, email, name, password_hash, created_at")
            .eq("email", normalize_email(email))
            .execute()
        )
        row = self._first(result.data)
        if row is None:
            return None
        return UserCredentials(
            id=str(row["id"]),
            email=row["email"],
            name=row.get("name"),
            password_hash=row.get("password_hash"),
            created_at=row["created_at"],
        )

    def list_users(self) -> list[UserProfile]:
        """List all user profiles, oldest first."""
        result = self._db.table("users").select(PROFILE_COLUMNS).order("created_at").execute()
        return [self._map_to_profile(row) for row in result.data]

    def create(self, email: str, password_hash: str, name: Optional[str]) -> UserProfile:
        """
        Create a user record.

        Raises:
            EmailAlreadyRegisteredError: If the email is already taken
        """
        normalized = normalize_email(email)
        data = {
            "email": normalized,
            "password_hash": password_hash,
            "name": name,
        }
        try:
            result = self._db.table("users").insert(data).execute()
        except APIError as e:
            if e.code == UNIQUE_VIOLATION:
                raise EmailAlreadyRegisteredError(normalized) from e
            raise
        return self._map_to_profile(result.data[0])

    def update(self, user_id: str, data: dict[str, Any]) -> Optional[UserProfile]:
        """
        Apply a partial update to a user.

        Returns:
            Updated profile, or None if the user does not exist.
        """
        payload = {**data, "updated_at": self._now_iso()}
        result = self._db.table("users").update(payload).eq("id", user_id).execute()
        row = self._first(result.data)
        return self._map_to_profile(row) if row else None

    def delete(self, user_id: str) -> bool:
        """
        Delete a user.

        Accounts and certificates are removed via CASCADE.

        Returns:
            True if a row was deleted.
        """
        result = self._db.table("users").delete().eq("id", user_id).execute()
        return bool(result.data)

    def _map_to_profile(self, data: dict[str, Any]) -> UserProfile:
        """Map database row to UserProfile model."""
        return UserProfile(
            id=str(data["id"]),
            email=data["email"],
            name=data.get("name"),
            image=data.get("image"),
            email_verified=data.get("email_verified"),
            created_at=data["created_at"],
            updated_at=data.get("updated_at") or data["created_at"],
        )
