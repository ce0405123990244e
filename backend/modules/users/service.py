"""
Users service implementation.
"""

import logging

from shared.ownership import OwnershipChecker

from .interfaces import IUserService
from .models import UserProfile, UpdateUserRequest
from .repository import UserRepository
from .exceptions import UserNotFoundError, UserAccessDeniedError

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """
    User profile service backed by UserRepository.

    A profile is owned by the user it describes.
    """

    def __init__(self, repository: UserRepository):
        self._repo = repository
        self._ownership: OwnershipChecker[UserProfile] = OwnershipChecker(
            load=repository.get_by_id,
            owner_of=lambda profile: profile.id,
            owner_keys_for=lambda user_id: [user_id],
        )

    async def get_user(self, user_id: str) -> UserProfile:
        user = self._repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def list_users(self) -> list[UserProfile]:
        return self._repo.list_users()

    async def update_user(
        self,
        target_user_id: str,
        user_id: str,
        request: UpdateUserRequest,
    ) -> UserProfile:
        """Update the caller's own profile."""
        self._require_self(target_user_id, user_id)

        patch = request.model_dump(exclude_unset=True)
        updated = self._repo.update(target_user_id, patch)
        if updated is None:
            raise UserNotFoundError(target_user_id)
        return updated

    async def delete_user(self, target_user_id: str, user_id: str) -> None:
        """Delete the caller's own user record."""
        self._require_self(target_user_id, user_id)

        if self._repo.get_by_id(target_user_id) is None:
            raise UserNotFoundError(target_user_id)

        self._repo.delete(target_user_id)
        logger.info(f"Deleted user {target_user_id}")

    async def can_modify(self, user_id: str, target_user_id: str) -> bool:
        return self._ownership.can_modify(user_id, target_user_id)

    def _require_self(self, target_user_id: str, user_id: str) -> None:
        # A profile's owner key is its own ID, so no load is needed and
        # other users' IDs are never probed
        if not self._ownership.holds(user_id, target_user_id):
            raise UserAccessDeniedError(target_user_id, user_id)
