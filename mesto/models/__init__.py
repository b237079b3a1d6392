"""MongoDB document layouts."""

from mesto.models.card import CARDS_COLLECTION, new_card_document
from mesto.models.user import USERS_COLLECTION, new_user_document

__all__ = [
    "CARDS_COLLECTION",
    "USERS_COLLECTION",
    "new_card_document",
    "new_user_document",
]
