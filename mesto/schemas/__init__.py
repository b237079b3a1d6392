"""Pydantic schemas for API requests and responses."""

from mesto.schemas.card import CardCreate, CardMessageResponse, CardResponse
from mesto.schemas.common import DataResponse, MessageResponse
from mesto.schemas.user import (
    UserAvatarUpdate,
    UserCreate,
    UserLogin,
    UserProfileUpdate,
    UserResponse,
)

__all__ = [
    "UserCreate",
    "UserLogin",
    "UserProfileUpdate",
    "UserAvatarUpdate",
    "UserResponse",
    "CardCreate",
    "CardResponse",
    "CardMessageResponse",
    "DataResponse",
    "MessageResponse",
]
