"""Configuration management for the application."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_JWT_SECRET = "change-me-in-production"  # noqa: S105


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    mongo_url: str = Field(default="mongodb://localhost:27017")
    mongo_db_name: str = Field(default="mestodb")

    # JWT
    jwt_secret: str = Field(default=DEFAULT_JWT_SECRET)
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_minutes: int = Field(default=10080)  # 7 days
    jwt_cookie_name: str = Field(default="jwt")
    cookie_secure: bool = Field(default=False)

    # API
    port: int = Field(default=3000)
    # Comma-separated in the environment: CORS_ORIGINS=https://a.com,https://b.com
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default=[
            "http://localhost:3000",
            "http://localhost:3001",
        ]
    )
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_cors_origins(cls, value):
        """Accept a comma-separated string as well as a list."""
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.environment == "production":
            if self.jwt_secret == DEFAULT_JWT_SECRET:
                raise ValueError("JWT_SECRET must be changed in production")
            if "localhost" in self.mongo_url:
                raise ValueError("MONGO_URL should not use localhost in production")
        return self

    @property
    def cookie_max_age(self) -> int:
        """Lifetime of the auth cookie in seconds, matching the token expiry."""
        return self.jwt_expiration_minutes * 60


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
