"""Card document."""

from datetime import UTC, datetime

from bson import ObjectId

CARDS_COLLECTION = "cards"


def new_card_document(name: str, link: str, owner: ObjectId) -> dict:
    """Build a card document owned by ``owner`` with no likes."""
    return {
        "name": name,
        "link": link,
        "owner": owner,
        "likes": [],
        "created_at": datetime.now(UTC),
    }
