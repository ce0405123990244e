"""
Users module interface.

Other modules should depend on IUserService, not the concrete implementation.
"""

from typing import Protocol, runtime_checkable

from .models import UserProfile, UpdateUserRequest


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for user profile operations.
    """

    async def get_user(self, user_id: str) -> UserProfile:
        """
        Get a user's profile.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        ...

    async def list_users(self) -> list[UserProfile]:
        """List all user profiles."""
        ...

    async def update_user(
        self,
        target_user_id: str,
        user_id: str,
        request: UpdateUserRequest,
    ) -> UserProfile:
        """
        Update name and/or image of a profile.

        Args:
            target_user_id: Profile to update
            user_id: Authenticated caller

        Raises:
            UserAccessDeniedError: If the caller is not the target user
            UserNotFoundError: If the user does not exist
        """
        ...

    async def delete_user(self, target_user_id: str, user_id: str) -> None:
        """
        Delete a user and everything they own.

        Raises:
            UserAccessDeniedError: If the caller is not the target user
            UserNotFoundError: If the user does not exist
        """
        ...

    async def can_modify(self, user_id: str, target_user_id: str) -> bool:
        """Whether the caller may modify the target profile."""
        ...
