"""
Account repository for database access.

Encapsulates Supabase queries for the accounts table.
"""

from typing import Any

from shared.repository import BaseRepository
from .models import Account, CREDENTIALS_PROVIDER


class AccountRepository(BaseRepository[Account]):
    """
    Repository for account data access.

    The accounts table has a unique constraint on (user_id, provider),
    which get_or_create_default relies on.
    """

    def get_or_create_default(self, user_id: str) -> Account:
        """
        Return the user's credentials account, creating it if needed.

        Implemented as a single upsert on (user_id, provider), so two
        concurrent first certificates from the same user end up sharing
        one account instead of racing a read-then-insert.
        """
        data = {
            "user_id": user_id,
            "type": CREDENTIALS_PROVIDER,
            "provider": CREDENTIALS_PROVIDER,
            "provider_account_id": user_id,
        }
        result = (
            self._db.table("accounts")
            .upsert(data, on_conflict="user_id,provider")
            .execute()
        )
        return self._map_to_account(result.data[0])

    def list_account_ids(self, user_id: str) -> list[str]:
        """IDs of all accounts belonging to a user."""
        result = self._db.table("accounts").select("id").eq("user_id", user_id).execute()
        return [str(row["id"]) for row in result.data]

    def _map_to_account(self, data: dict[str, Any]) -> Account:
        """Map database row to Account model."""
        return Account(
            id=str(data["id"]),
            user_id=str(data["user_id"]),
            type=data.get("type", CREDENTIALS_PROVIDER),
            provider=data.get("provider", CREDENTIALS_PROVIDER),
            provider_account_id=str(data["provider_account_id"]),
            created_at=data.get("created_at"),
        )
