"""Card API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from mesto.api.dependencies import CurrentUserId, get_card_service
from mesto.schemas.card import CardCreate, CardMessageResponse, CardResponse
from mesto.schemas.common import OBJECT_ID_PATTERN, DataResponse
from mesto.services.card_service import CardService

router = APIRouter(prefix="/cards", tags=["cards"])

CardId = Annotated[str, Path(pattern=OBJECT_ID_PATTERN)]


@router.get("", response_model=list[CardResponse])
async def get_cards(
    current_user_id: CurrentUserId,
    cards: Annotated[CardService, Depends(get_card_service)],
):
    """Get all cards."""
    return await cards.list_cards()


@router.post("", response_model=DataResponse[CardResponse], status_code=status.HTTP_201_CREATED)
async def create_card(
    card_data: CardCreate,
    current_user_id: CurrentUserId,
    cards: Annotated[CardService, Depends(get_card_service)],
):
    """Create a card owned by the current user."""
    card = await cards.create_card(current_user_id, card_data)
    return {"data": card}


@router.delete("/{card_id}", response_model=CardMessageResponse)
async def delete_card(
    card_id: CardId,
    current_user_id: CurrentUserId,
    cards: Annotated[CardService, Depends(get_card_service)],
):
    """Delete a card. Only its owner may do this."""
    card = await cards.delete_card(card_id, current_user_id)
    return {"message": "Card deleted", "card": card}


@router.put("/{card_id}/likes", response_model=CardMessageResponse)
async def like_card(
    card_id: CardId,
    current_user_id: CurrentUserId,
    cards: Annotated[CardService, Depends(get_card_service)],
):
    """Like a card."""
    card = await cards.like_card(card_id, current_user_id)
    return {"message": "Card liked", "card": card}


@router.delete("/{card_id}/likes", response_model=CardMessageResponse)
async def dislike_card(
    card_id: CardId,
    current_user_id: CurrentUserId,
    cards: Annotated[CardService, Depends(get_card_service)],
):
    """Remove the current user's like from a card."""
    card = await cards.dislike_card(card_id, current_user_id)
    return {"message": "Like removed", "card": card}
