"""ObjectId parsing shared by the services."""

from bson import ObjectId
from bson.errors import InvalidId

from mesto.errors import BadRequestError


def parse_object_id(value: str, message: str = "Invalid id") -> ObjectId:
    """Convert a hex string to an ObjectId, mapping bad input to BadRequestError."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise BadRequestError(message) from e
