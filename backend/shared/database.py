"""
Database client factory for MongoDB.

Provides a cached PyMongo async client and the application database,
plus index bootstrapping run at application startup.
"""

import logging
from typing import Any, Optional

from pymongo import AsyncMongoClient, ASCENDING
from pymongo.errors import PyMongoError
from pymongo.asynchronous.database import AsyncDatabase

from .config import get_settings

logger = logging.getLogger(__name__)

# Collection names
USERS_COLLECTION = "users"
POSTS_COLLECTION = "posts"
SESSIONS_COLLECTION = "sessions"

# Module-level client cache
_client: Optional[AsyncMongoClient] = None


def get_mongo_client() -> AsyncMongoClient:
    """
    Get the shared MongoDB client.

    The client is created lazily and does not connect until the first
    operation is performed.

    Returns:
        AsyncMongoClient configured from settings
    """
    global _client

    if _client is None:
        settings = get_settings()
        if not settings.mongo_uri:
            raise RuntimeError(
                "MongoDB configuration missing. "
                "Set the SOCIALDECK_MONGO_URI environment variable."
            )
        _client = AsyncMongoClient(settings.mongo_uri, tz_aware=True)

    return _client


def get_database() -> AsyncDatabase[dict[str, Any]]:
    """Get the application database."""
    return get_mongo_client()[get_settings().mongo_db_name]


async def ensure_indexes(db: AsyncDatabase[dict[str, Any]]) -> None:
    """
    Create the indexes the application relies on.

    - users.email is unique
    - posts.creatorID speeds up per-user lookups and cascade deletes
    - sessions.expiresAt is a TTL index so expired sessions are purged
    """
    await db[USERS_COLLECTION].create_index([("email", ASCENDING)], unique=True)
    await db[POSTS_COLLECTION].create_index([("creatorID", ASCENDING)])
    await db[SESSIONS_COLLECTION].create_index(
        [("expiresAt", ASCENDING)],
        expireAfterSeconds=0,
    )
    logger.info("Database indexes ensured on '%s'", db.name)


async def ping_database() -> bool:
    """Return True if the database answers a ping."""
    try:
        await get_mongo_client().admin.command("ping")
        return True
    except PyMongoError:
        logger.warning("Database ping failed", exc_info=True)
        return False


async def close_mongo_client() -> None:
    """
    Close and forget the cached database client.

    Called on application shutdown and useful for testing.
    """
    global _client
    if _client is not None:
        await _client.close()
        _client = None


def reset_client_cache() -> None:
    """
    Reset the cached database client without closing it.

    Useful for testing or when configuration changes.
    """
    global _client
    _client = None
