"""
Shared infrastructure for SocialDeck backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- database: MongoDB client factory and index bootstrapping
- exceptions: Base exception classes and error codes
- repository: Base repository for collection access

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .database import (
    get_mongo_client,
    get_database,
    ensure_indexes,
    close_mongo_client,
    reset_client_cache,
)
from .exceptions import (
    ErrorCode,
    SocialDeckError,
    InvalidQueryError,
    NotFoundError,
    AuthenticationError,
    AlreadyAuthenticatedError,
    InternalError,
    DatabaseError,
)
from .models import AuthenticatedUser

__all__ = [
    "Settings",
    "get_settings",
    "get_mongo_client",
    "get_database",
    "ensure_indexes",
    "close_mongo_client",
    "reset_client_cache",
    "ErrorCode",
    "SocialDeckError",
    "InvalidQueryError",
    "NotFoundError",
    "AuthenticationError",
    "AlreadyAuthenticatedError",
    "InternalError",
    "DatabaseError",
    "AuthenticatedUser",
]
