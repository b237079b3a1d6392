"""Card service: creation, owner-only deletion and likes."""

import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from mesto.errors import ForbiddenError, InternalError, NotFoundError
from mesto.models.card import CARDS_COLLECTION, new_card_document
from mesto.schemas.card import CardCreate
from mesto.services.ids import parse_object_id

logger = logging.getLogger(__name__)

INVALID_CARD_ID_MESSAGE = "Invalid card id"
CARD_NOT_FOUND_MESSAGE = "Card with the given id not found"
NOT_OWNER_MESSAGE = "Only the owner may delete this card"


class CardService:
    """Service for card-related operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.cards = db[CARDS_COLLECTION]

    async def list_cards(self) -> list[dict]:
        """Return every card."""
        return await self.cards.find({}).to_list(length=None)

    async def create_card(self, owner_id: str, data: CardCreate) -> dict:
        """Insert a card owned by ``owner_id``."""
        owner = parse_object_id(owner_id)
        document = new_card_document(name=data.name, link=data.link, owner=owner)
        result = await self.cards.insert_one(document)
        if not result.acknowledged:
            raise InternalError(f"Insert of card for user {owner_id} was not acknowledged")
        document["_id"] = result.inserted_id
        logger.info(f"User {owner_id} created card {result.inserted_id}")
        return document

    async def delete_card(self, card_id: str, user_id: str) -> dict:
        """Delete a card if ``user_id`` owns it and return the deleted card.

        Reads the card, compares the owner, then deletes.
        """
        oid = parse_object_id(card_id, INVALID_CARD_ID_MESSAGE)
        card = await self.cards.find_one({"_id": oid})
        if card is None:
            raise NotFoundError(CARD_NOT_FOUND_MESSAGE)
        if str(card["owner"]) != str(user_id):
            raise ForbiddenError(NOT_OWNER_MESSAGE)

        deleted = await self.cards.find_one_and_delete({"_id": oid})
        if deleted is None:
            raise NotFoundError(CARD_NOT_FOUND_MESSAGE)
        logger.info(f"User {user_id} deleted card {card_id}")
        return deleted

    async def like_card(self, card_id: str, user_id: str) -> dict:
        """Add ``user_id`` to the card's likes; liking twice changes nothing."""
        return await self._update_likes(card_id, user_id, "$addToSet")

    async def dislike_card(self, card_id: str, user_id: str) -> dict:
        """Remove ``user_id`` from the card's likes; a no-op if it is absent."""
        return await self._update_likes(card_id, user_id, "$pull")

    async def _update_likes(self, card_id: str, user_id: str, operator: str) -> dict:
        oid = parse_object_id(card_id, INVALID_CARD_ID_MESSAGE)
        card = await self.cards.find_one_and_update(
            {"_id": oid},
            {operator: {"likes": parse_object_id(user_id)}},
            return_document=ReturnDocument.AFTER,
        )
        if card is None:
            raise NotFoundError(CARD_NOT_FOUND_MESSAGE)
        return card
