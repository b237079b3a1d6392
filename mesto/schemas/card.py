"""Card schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from mesto.schemas.common import URL_PATTERN, ObjectIdStr


class CardCreate(BaseModel):
    """Create a new card."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=2, max_length=30)
    link: str = Field(..., pattern=URL_PATTERN)


class CardResponse(BaseModel):
    """Card response."""

    model_config = ConfigDict(populate_by_name=True)

    id: ObjectIdStr = Field(..., alias="_id")
    name: str
    link: str
    owner: ObjectIdStr
    likes: list[ObjectIdStr] = Field(default_factory=list)
    created_at: datetime


class CardMessageResponse(BaseModel):
    """Message plus the affected card, used by delete and like endpoints."""

    message: str
    card: CardResponse
