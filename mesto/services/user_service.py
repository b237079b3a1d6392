"""User service: signup, lookup, profile updates and credential checks."""

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError
from starlette.concurrency import run_in_threadpool

from mesto.errors import ConflictError, InternalError, NotFoundError, UnauthorizedError
from mesto.models.user import PUBLIC_PROJECTION, USERS_COLLECTION, new_user_document
from mesto.schemas.user import UserCreate
from mesto.services.auth import get_password_hash, verify_password
from mesto.services.ids import parse_object_id

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Incorrect email or password"
INVALID_USER_ID_MESSAGE = "Invalid user id"
USER_NOT_FOUND_MESSAGE = "User with the given id not found"


class UserService:
    """Service for user-related operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.users = db[USERS_COLLECTION]

    async def list_users(self) -> list[dict]:
        """Return every user."""
        return await self.users.find({}, PUBLIC_PROJECTION).to_list(length=None)

    async def get_user(self, user_id: str) -> dict:
        """Return one user or raise NotFoundError."""
        oid = parse_object_id(user_id, INVALID_USER_ID_MESSAGE)
        user = await self.users.find_one({"_id": oid}, PUBLIC_PROJECTION)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND_MESSAGE)
        return user

    async def create_user(self, data: UserCreate) -> dict:
        """Hash the password and insert a new user.

        The returned document has no password field.
        """
        document = new_user_document(
            email=data.email,
            password_hash=await run_in_threadpool(get_password_hash, data.password),
            name=data.name,
            about=data.about,
            avatar=data.avatar,
        )
        try:
            result = await self.users.insert_one(document)
        except DuplicateKeyError as e:
            raise ConflictError("A user with this email already exists") from e
        if not result.acknowledged:
            raise InternalError("Insert of new user was not acknowledged")

        logger.info(f"Created user {result.inserted_id}")
        created = {key: value for key, value in document.items() if key != "password"}
        created["_id"] = result.inserted_id
        return created

    async def update_profile(self, user_id: str, name: str, about: str) -> dict:
        """Update the caller's name and about fields."""
        return await self._update(user_id, {"name": name, "about": about})

    async def update_avatar(self, user_id: str, avatar: str) -> dict:
        """Update the caller's avatar."""
        return await self._update(user_id, {"avatar": avatar})

    async def _update(self, user_id: str, fields: dict) -> dict:
        oid = parse_object_id(user_id, INVALID_USER_ID_MESSAGE)
        user = await self.users.find_one_and_update(
            {"_id": oid},
            {"$set": fields},
            projection=PUBLIC_PROJECTION,
            return_document=ReturnDocument.AFTER,
        )
        if user is None:
            raise NotFoundError(USER_NOT_FOUND_MESSAGE)
        return user

    async def authenticate(self, email: str, password: str) -> dict:
        """Check credentials and return the user without its password.

        Unknown email and wrong password fail with the same message.
        """
        user = await self.users.find_one({"email": email})
        if user is None:
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

        try:
            valid = await run_in_threadpool(verify_password, password, user["password"])
        except ValueError:
            logger.warning(f"Stored password hash for user {user['_id']} is unreadable")
            valid = False

        if not valid:
            raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

        user.pop("password", None)
        return user
