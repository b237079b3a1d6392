"""User schemas."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from mesto.schemas.common import URL_PATTERN, ObjectIdStr


class UserCreate(BaseModel):
    """Signup request."""

    model_config = ConfigDict(extra="forbid")

    email: EmailStr
    password: str = Field(..., min_length=1)
    name: str | None = Field(None, min_length=2, max_length=30)
    about: str | None = Field(None, min_length=2, max_length=30)
    avatar: str | None = Field(None, pattern=URL_PATTERN)


class UserLogin(UserCreate):
    """Signin request. Accepts the signup fields; only email and password are used."""


class UserProfileUpdate(BaseModel):
    """Profile update request."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=2, max_length=30)
    about: str = Field(..., min_length=2, max_length=30)


class UserAvatarUpdate(BaseModel):
    """Avatar update request."""

    model_config = ConfigDict(extra="forbid")

    avatar: str = Field(..., pattern=URL_PATTERN)


class UserResponse(BaseModel):
    """User information response. Never carries the password hash."""

    model_config = ConfigDict(populate_by_name=True)

    id: ObjectIdStr = Field(..., alias="_id")
    email: str
    name: str
    about: str
    avatar: str
