"""Shared field types and response envelopes."""

from typing import Annotated, Generic, TypeVar

from pydantic import BaseModel, BeforeValidator

# http(s), optional www., a dotted host, then an optional path/query/fragment
URL_PATTERN = (
    r"^https?://(www\.)?[\w\-.~]+\.[a-zA-Z]{2,}(:\d+)?"
    r"([\w\-._~:/?#\[\]@!$&'()*+,;=%]*)$"
)

OBJECT_ID_PATTERN = r"^[0-9a-fA-F]{24}$"

# bson ObjectId values coming out of the store are rendered as hex strings
ObjectIdStr = Annotated[str, BeforeValidator(str)]

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Envelope used for created records and login."""

    data: T


class MessageResponse(BaseModel):
    """Plain message response."""

    message: str
