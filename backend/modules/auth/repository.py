"""
Session repository for database access.

Server-side sessions live in the `sessions` collection, keyed by the
session cookie value. A TTL index on expiresAt purges expired documents;
reads also check expiry because TTL cleanup runs periodically.
"""

import secrets
from datetime import datetime, timedelta
from typing import Any, Optional

from shared.database import SESSIONS_COLLECTION
from shared.models import AuthenticatedUser
from shared.repository import BaseRepository
from .models import Session

# Session ID length (bytes of randomness)
SESSION_ID_BYTES = 32


class SessionRepository(BaseRepository[Session]):
    """Repository for server-side sessions."""

    collection_name = SESSIONS_COLLECTION

    async def create(
        self,
        user: AuthenticatedUser,
        lifetime_seconds: int,
        now: datetime,
    ) -> Session:
        """Open a new session holding a snapshot of the user."""
        session = Session(
            id=secrets.token_urlsafe(SESSION_ID_BYTES),
            user=user,
            created_at=now,
            expires_at=now + timedelta(seconds=lifetime_seconds),
        )
        doc = {
            "_id": session.id,
            "user": {
                "_id": user.id,
                "email": user.email,
                "firstName": user.first_name,
                "lastName": user.last_name,
            },
            "createdAt": session.created_at,
            "expiresAt": session.expires_at,
        }
        with self._translate_errors("create_session"):
            await self._collection.insert_one(doc)

        return session

    async def get(self, session_id: str) -> Optional[Session]:
        """Get a session by ID regardless of expiry."""
        with self._translate_errors("get_session"):
            doc = await self._collection.find_one({"_id": session_id})

        return self._map_to_session(doc) if doc else None

    async def delete(self, session_id: str) -> bool:
        """Destroy a session. Returns True if it existed."""
        with self._translate_errors("delete_session"):
            result = await self._collection.delete_one({"_id": session_id})

        return result.deleted_count > 0

    async def delete_for_user(self, user_id: str) -> int:
        """Destroy every session belonging to a user."""
        with self._translate_errors("delete_sessions_for_user"):
            result = await self._collection.delete_many({"user._id": user_id})

        return result.deleted_count

    async def delete_all(self) -> int:
        """Destroy every session."""
        with self._translate_errors("delete_all_sessions"):
            result = await self._collection.delete_many({})

        return result.deleted_count

    def _map_to_session(self, data: dict[str, Any]) -> Session:
        user = data["user"]
        return Session(
            id=data["_id"],
            user=AuthenticatedUser(
                id=user["_id"],
                email=user["email"],
                first_name=user.get("firstName"),
                last_name=user.get("lastName"),
            ),
            created_at=data["createdAt"],
            expires_at=data["expiresAt"],
        )
