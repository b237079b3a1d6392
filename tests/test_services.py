"""Service-level tests against an in-memory MongoDB."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId
from pymongo.results import InsertOneResult
from starlette.concurrency import run_in_threadpool

from mesto.database import init_indexes
from mesto.errors import (
    BadRequestError,
    ConflictError,
    ForbiddenError,
    InternalError,
    NotFoundError,
    UnauthorizedError,
)
from mesto.schemas.card import CardCreate
from mesto.schemas.user import UserCreate
from mesto.services.auth import get_password_hash, verify_password
from mesto.services.card_service import CardService
from mesto.services.user_service import UserService

ELBRUS = CardCreate(name="Elbrus", link="https://example.com/e.jpg")


@pytest.fixture
def users(mongo_db):
    return UserService(mongo_db)


@pytest.fixture
def cards(mongo_db):
    return CardService(mongo_db)


class TestUserService:
    """Tests for UserService."""

    @pytest.mark.asyncio
    async def test_create_user_stores_hash_only(self, users, mongo_db):
        """The stored password is a hash and the returned record has none."""
        created = await users.create_user(UserCreate(email="a@x.com", password="secret1"))
        assert "password" not in created

        stored = await mongo_db["users"].find_one({"_id": created["_id"]})
        assert stored["password"] != "secret1"
        assert stored["password"].startswith("$2b$")

    @pytest.mark.asyncio
    async def test_duplicate_email_conflict(self, users, mongo_db):
        """The unique email index maps to ConflictError."""
        await init_indexes(mongo_db)
        await users.create_user(UserCreate(email="a@x.com", password="secret1"))
        with pytest.raises(ConflictError):
            await users.create_user(UserCreate(email="a@x.com", password="secret2"))

    @pytest.mark.asyncio
    async def test_authenticate(self, users):
        """Correct credentials return the user without its password."""
        created = await users.create_user(UserCreate(email="a@x.com", password="secret1"))
        user = await users.authenticate("a@x.com", "secret1")
        assert user["_id"] == created["_id"]
        assert "password" not in user

    @pytest.mark.asyncio
    async def test_authenticate_failures_are_uniform(self, users):
        """Unknown email and wrong password raise the same message."""
        await users.create_user(UserCreate(email="a@x.com", password="secret1"))
        with pytest.raises(UnauthorizedError) as wrong_password:
            await users.authenticate("a@x.com", "wrong")
        with pytest.raises(UnauthorizedError) as unknown_email:
            await users.authenticate("b@x.com", "secret1")
        assert wrong_password.value.message == unknown_email.value.message

    @pytest.mark.asyncio
    async def test_hashing_runs_in_threadpool(self, users):
        """bcrypt work is handed to the threadpool, not run on the event loop."""
        with patch(
            "mesto.services.user_service.run_in_threadpool", wraps=run_in_threadpool
        ) as pool:
            await users.create_user(UserCreate(email="a@x.com", password="secret1"))
            await users.authenticate("a@x.com", "secret1")

        called = [c.args[0] for c in pool.call_args_list]
        assert called == [get_password_hash, verify_password]

    @pytest.mark.asyncio
    async def test_unacknowledged_insert(self, users):
        users.users = MagicMock()
        users.users.insert_one = AsyncMock(return_value=InsertOneResult(ObjectId(), False))
        with pytest.raises(InternalError):
            await users.create_user(UserCreate(email="a@x.com", password="secret1"))

    @pytest.mark.asyncio
    async def test_get_user_invalid_id(self, users):
        with pytest.raises(BadRequestError):
            await users.get_user("nope")

    @pytest.mark.asyncio
    async def test_update_missing_user(self, users):
        with pytest.raises(NotFoundError):
            await users.update_avatar(str(ObjectId()), "https://example.com/a.png")


class TestCardService:
    """Tests for CardService."""

    @pytest.mark.asyncio
    async def test_create_card_sets_owner(self, cards):
        owner_id = str(ObjectId())
        card = await cards.create_card(owner_id, ELBRUS)
        assert str(card["owner"]) == owner_id
        assert card["likes"] == []

    @pytest.mark.asyncio
    async def test_delete_by_non_owner(self, cards):
        card = await cards.create_card(str(ObjectId()), ELBRUS)
        with pytest.raises(ForbiddenError):
            await cards.delete_card(str(card["_id"]), str(ObjectId()))
        assert len(await cards.list_cards()) == 1

    @pytest.mark.asyncio
    async def test_delete_by_owner(self, cards):
        owner_id = str(ObjectId())
        card = await cards.create_card(owner_id, ELBRUS)
        deleted = await cards.delete_card(str(card["_id"]), owner_id)
        assert deleted["_id"] == card["_id"]
        assert await cards.list_cards() == []

    @pytest.mark.asyncio
    async def test_like_and_dislike_are_idempotent(self, cards):
        user_id = str(ObjectId())
        card = await cards.create_card(user_id, ELBRUS)
        card_id = str(card["_id"])

        await cards.like_card(card_id, user_id)
        liked = await cards.like_card(card_id, user_id)
        assert liked["likes"] == [ObjectId(user_id)]

        await cards.dislike_card(card_id, user_id)
        disliked = await cards.dislike_card(card_id, user_id)
        assert disliked["likes"] == []

    @pytest.mark.asyncio
    async def test_like_missing_card(self, cards):
        with pytest.raises(NotFoundError):
            await cards.like_card(str(ObjectId()), str(ObjectId()))

    @pytest.mark.asyncio
    async def test_unacknowledged_card_insert(self, cards):
        cards.cards = MagicMock()
        cards.cards.insert_one = AsyncMock(return_value=InsertOneResult(ObjectId(), False))
        with pytest.raises(InternalError):
            await cards.create_card(str(ObjectId()), ELBRUS)
