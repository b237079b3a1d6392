"""Signup, signin and signout endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from mesto.api.dependencies import get_user_service
from mesto.config import get_settings
from mesto.schemas.common import DataResponse, MessageResponse
from mesto.schemas.user import UserCreate, UserLogin, UserResponse
from mesto.services.auth import create_access_token
from mesto.services.user_service import UserService

settings = get_settings()

router = APIRouter(tags=["auth"])


@router.post(
    "/signup",
    response_model=DataResponse[UserResponse],
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    user_data: UserCreate,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Register a new user."""
    user = await users.create_user(user_data)
    return {"data": user}


@router.post("/signin", response_model=DataResponse[UserResponse])
async def signin(
    credentials: UserLogin,
    response: Response,
    users: Annotated[UserService, Depends(get_user_service)],
):
    """Login with email and password; the token is set as an httpOnly cookie."""
    user = await users.authenticate(credentials.email, credentials.password)

    response.set_cookie(
        key=settings.jwt_cookie_name,
        value=create_access_token(str(user["_id"])),
        max_age=settings.cookie_max_age,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    return {"data": user}


@router.post("/signout", response_model=MessageResponse)
async def signout(response: Response):
    """Logout by clearing the auth cookie."""
    response.delete_cookie(
        key=settings.jwt_cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    return {"message": "Signed out"}
