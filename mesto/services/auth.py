"""Authentication service for JWT and password handling."""

from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext

from mesto.config import get_settings
from mesto.errors import InvalidTokenError

settings = get_settings()

# Password hashing context, fixed work factor of 10
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(user_id: str) -> str:
    """Create a JWT access token for ``user_id``."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "sub": str(user_id),
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> str:
    """Validate a JWT token and return its subject user id.

    Raises:
        InvalidTokenError: if the token is malformed, tampered with, expired,
            has no expiry or has no subject.
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require_exp": True},
        )
    except JWTError as e:
        raise InvalidTokenError(str(e)) from e

    user_id = payload.get("sub")
    if not user_id:
        raise InvalidTokenError("Token has no subject")
    return user_id
