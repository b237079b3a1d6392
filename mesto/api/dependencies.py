"""FastAPI dependencies for authentication and services."""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import APIKeyCookie
from motor.motor_asyncio import AsyncIOMotorDatabase

from mesto.config import get_settings
from mesto.database import get_db
from mesto.errors import InvalidTokenError, UnauthorizedError
from mesto.services.auth import decode_access_token
from mesto.services.card_service import CardService
from mesto.services.user_service import UserService

logger = logging.getLogger(__name__)

settings = get_settings()

cookie_scheme = APIKeyCookie(name=settings.jwt_cookie_name, auto_error=False)

AUTH_REQUIRED_MESSAGE = "Authorization required"


def get_current_user_id(
    token: Annotated[str | None, Depends(cookie_scheme)],
) -> str:
    """Get the authenticated user's id from the JWT cookie.

    A missing cookie and a bad token fail with the same message.
    """
    if not token:
        raise UnauthorizedError(AUTH_REQUIRED_MESSAGE)

    try:
        return decode_access_token(token)
    except InvalidTokenError as e:
        logger.info(f"Rejected auth token: {e}")
        raise UnauthorizedError(AUTH_REQUIRED_MESSAGE) from e


def get_user_service(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_db)],
) -> UserService:
    """Get user service bound to the current database."""
    return UserService(db)


def get_card_service(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_db)],
) -> CardService:
    """Get card service bound to the current database."""
    return CardService(db)


CurrentUserId = Annotated[str, Depends(get_current_user_id)]
