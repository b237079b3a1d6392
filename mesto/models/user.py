"""User document."""

from datetime import UTC, datetime

USERS_COLLECTION = "users"

DEFAULT_NAME = "Jacques-Yves Cousteau"
DEFAULT_ABOUT = "Explorer"
DEFAULT_AVATAR = "https://pictures.s3.yandex.net/resources/jacques-cousteau_1604399756.png"

# Projection that keeps the password hash out of every read
PUBLIC_PROJECTION = {"password": 0}


def new_user_document(
    email: str,
    password_hash: str,
    name: str | None = None,
    about: str | None = None,
    avatar: str | None = None,
) -> dict:
    """Build a user document ready for insertion."""
    return {
        "email": email,
        "password": password_hash,
        "name": name or DEFAULT_NAME,
        "about": about or DEFAULT_ABOUT,
        "avatar": avatar or DEFAULT_AVATAR,
        "created_at": datetime.now(UTC),
    }
