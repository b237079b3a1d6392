"""User API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from mesto.api.dependencies import CurrentUserId, get_user_service
from mesto.schemas.common import OBJECT_ID_PATTERN
from mesto.schemas.user import UserAvatarUpdate, UserProfileUpdate, UserResponse
from mesto.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def get_users(
    current_user_id: CurrentUserId,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Get all users."""
    return await users.list_users()


# /me routes are registered before /{user_id} so "me" is not taken as an id
@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user_id: CurrentUserId,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Get current user information."""
    return await users.get_user(current_user_id)


@router.patch("/me", response_model=UserResponse)
async def update_me(
    profile: UserProfileUpdate,
    current_user_id: CurrentUserId,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Update the current user's name and about."""
    return await users.update_profile(current_user_id, profile.name, profile.about)


@router.patch("/me/avatar", response_model=UserResponse)
async def update_my_avatar(
    avatar_data: UserAvatarUpdate,
    current_user_id: CurrentUserId,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Update the current user's avatar."""
    return await users.update_avatar(current_user_id, avatar_data.avatar)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: Annotated[str, Path(pattern=OBJECT_ID_PATTERN)],
    current_user_id: CurrentUserId,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Get a user by id."""
    return await users.get_user(user_id)
