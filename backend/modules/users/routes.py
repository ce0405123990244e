"""
User profile API endpoints.

Mounted under both /api/users and /api/user so /api/user/me keeps working
for older clients.
"""

from fastapi import APIRouter, Depends

from api.middleware.auth import get_current_user
from api.dependencies import get_user_service
from shared.models import AuthenticatedUser

from .interfaces import IUserService
from .models import UserProfile, UpdateUserRequest

router = APIRouter()


@router.get("/me", response_model=UserProfile)
async def get_current_user_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserProfile:
    """
    Get the current user's profile.
    """
    return await service.get_user(user.id)


@router.get("", response_model=list[UserProfile])
async def list_users(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> list[UserProfile]:
    """List all user profiles."""
    return await service.list_users()


@router.get("/{user_id}", response_model=UserProfile)
async def get_user(
    user_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserProfile:
    return await service.get_user(user_id)


@router.put("/{user_id}", response_model=UserProfile)
async def update_user(
    user_id: str,
    request: UpdateUserRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> UserProfile:
    """
    Update your own name or avatar.

    Email cannot be changed; extra fields are ignored.
    """
    return await service.update_user(user_id, user.id, request)


@router.delete("/{user_id}", status_code=204)
async def delete_user(
    user_id: str,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IUserService = Depends(get_user_service),
) -> None:
    """
    Delete your own account, with all accounts and certificates.
    """
    await service.delete_user(user_id, user.id)
