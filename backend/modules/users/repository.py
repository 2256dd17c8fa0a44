"""
User repository for database access.

Encapsulates all MongoDB queries and data mapping for the `users` collection.
"""

from typing import Any, Optional

from pymongo.errors import DuplicateKeyError

from shared.database import USERS_COLLECTION
from shared.repository import BaseRepository, to_object_id
from .exceptions import UserAlreadyExistsError
from .models import User, UserCreate


class UserRepository(BaseRepository[User]):
    """
    Repository for user data access.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for gating access.
    """

    collection_name = USERS_COLLECTION

    async def create(self, data: UserCreate) -> User:
        """
        Insert a new user.

        Raises:
            UserAlreadyExistsError: If the email is already taken (unique index).
        """
        doc = {
            "email": data.email,
            "password": data.password_hash,
            "firstName": data.first_name,
            "lastName": data.last_name,
        }
        with self._translate_errors("create_user"):
            try:
                result = await self._collection.insert_one(doc)
            except DuplicateKeyError:
                raise UserAlreadyExistsError(data.email)

        doc["_id"] = result.inserted_id
        return self._map_to_user(doc)

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get a user by ID, or None if missing or the ID is malformed."""
        oid = to_object_id(user_id)
        if oid is None:
            return None

        with self._translate_errors("get_user"):
            doc = await self._collection.find_one({"_id": oid})

        return self._map_to_user(doc) if doc else None

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get a user by exact (case-sensitive) email."""
        with self._translate_errors("get_user_by_email"):
            doc = await self._collection.find_one({"email": email})

        return self._map_to_user(doc) if doc else None

    async def list_all(self) -> list[User]:
        """Get every user in the collection."""
        with self._translate_errors("list_users"):
            docs = await self._collection.find({}).to_list(length=None)

        return [self._map_to_user(d) for d in docs]

    async def delete_by_id(self, user_id: str) -> bool:
        """Delete a user. Returns True if a document was removed."""
        oid = to_object_id(user_id)
        if oid is None:
            return False

        with self._translate_errors("delete_user"):
            result = await self._collection.delete_one({"_id": oid})

        return result.deleted_count > 0

    async def delete_all(self) -> int:
        """Delete every user. Returns the number of removed documents."""
        with self._translate_errors("delete_all_users"):
            result = await self._collection.delete_many({})

        return result.deleted_count

    # -------------------------------------------------------------------------
    # Mapping helpers
    # -------------------------------------------------------------------------

    def _map_to_user(self, data: dict[str, Any]) -> User:
        """Map a users document to a User model."""
        return User(
            id=str(data["_id"]),
            email=data["email"],
            password_hash=data["password"],
            first_name=data.get("firstName"),
            last_name=data.get("lastName"),
        )
