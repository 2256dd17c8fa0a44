"""
Centralized configuration for the SocialDeck backend.

All settings are loaded from environment variables with sensible defaults.
Variables are prefixed with SOCIALDECK_ (e.g., SOCIALDECK_JWT_SECRET).
"""

from functools import lru_cache
from typing import Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SOCIALDECK_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "SocialDeck API"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 7000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # MongoDB
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "socialDeckDB"

    # JSON Web Tokens
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expires_minutes: int = 60

    # Which identity mechanism is authoritative for incoming requests
    auth_mode: Literal["session", "token"] = "session"

    # Server-side sessions
    session_cookie_name: str = "ebimumaykata"
    session_lifetime_seconds: int = 60 * 60
    session_cookie_secure: bool = False
    session_cookie_httponly: bool = True

    # Password hashing
    bcrypt_rounds: int = 10

    # GraphQL
    graphql_ide: bool = True

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """Bcrypt cost factor must be at least 10 and at most 31."""
        if v < 10 or v > 31:
            raise ValueError("bcrypt_rounds must be between 10 and 31")
        return v


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
