"""
Post repository for database access.

Encapsulates all MongoDB queries and data mapping for the `posts` collection.
"""

from datetime import datetime
from typing import Any, Optional

from pymongo import ReturnDocument

from shared.database import POSTS_COLLECTION
from shared.repository import BaseRepository, to_object_id
from .models import Post, PostCreate


class PostRepository(BaseRepository[Post]):
    """
    Repository for post data access.

    All methods return Pydantic models with proper mapping from documents.

    Note: This repository does NOT perform authorization checks.
    The service layer is responsible for verifying user ownership.
    """

    collection_name = POSTS_COLLECTION

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    async def get_by_id(self, post_id: str) -> Optional[Post]:
        """Get a post by ID, or None if missing or the ID is malformed."""
        oid = to_object_id(post_id)
        if oid is None:
            return None

        with self._translate_errors("get_post"):
            doc = await self._collection.find_one({"_id": oid})

        return self._map_to_post(doc) if doc else None

    async def list_all(self) -> list[Post]:
        """Get every post in the collection."""
        with self._translate_errors("list_posts"):
            docs = await self._collection.find({}).to_list(length=None)

        return [self._map_to_post(d) for d in docs]

    async def list_by_creator(self, creator_id: str) -> list[Post]:
        """Get all posts created by a user."""
        with self._translate_errors("list_posts_by_creator"):
            docs = await self._collection.find({"creatorID": creator_id}).to_list(length=None)

        return [self._map_to_post(d) for d in docs]

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    async def create(self, data: PostCreate) -> Post:
        """Insert a new post with no updates and no shares."""
        doc = {
            "creatorID": data.creator_id,
            "createdTime": data.created_time,
            "message": data.message,
            "updatedTime": None,
            "links": list(data.links),
            "shares": [],
        }
        with self._translate_errors("create_post"):
            result = await self._collection.insert_one(doc)

        doc["_id"] = result.inserted_id
        return self._map_to_post(doc)

    async def update_content(
        self,
        post_id: str,
        message: str,
        links: list[str],
        updated_time: datetime,
    ) -> Optional[Post]:
        """
        Overwrite a post's message and links.

        Returns:
            The updated post, or None if it does not exist.
        """
        return await self._find_and_update(
            "update_post",
            post_id,
            {
                "$set": {
                    "message": message,
                    "links": list(links),
                    "updatedTime": updated_time,
                },
            },
        )

    async def add_share(
        self,
        post_id: str,
        user_id: str,
        updated_time: datetime,
    ) -> Optional[Post]:
        """
        Atomically add a user to a post's share set.

        The user is added only if not already present; updatedTime is
        stamped either way.

        Returns:
            The updated post, or None if it does not exist.
        """
        return await self._find_and_update(
            "share_post",
            post_id,
            {
                "$addToSet": {"shares": user_id},
                "$set": {"updatedTime": updated_time},
            },
        )

    async def delete_by_id(self, post_id: str) -> bool:
        """Delete a post. Returns True if a document was removed."""
        oid = to_object_id(post_id)
        if oid is None:
            return False

        with self._translate_errors("delete_post"):
            result = await self._collection.delete_one({"_id": oid})

        return result.deleted_count > 0

    async def delete_by_creator(self, creator_id: str) -> int:
        """Delete all posts created by a user. Returns the number removed."""
        with self._translate_errors("delete_posts_by_creator"):
            result = await self._collection.delete_many({"creatorID": creator_id})

        return result.deleted_count

    async def delete_all(self) -> int:
        """Delete every post. Returns the number removed."""
        with self._translate_errors("delete_all_posts"):
            result = await self._collection.delete_many({})

        return result.deleted_count

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    async def _find_and_update(
        self,
        operation: str,
        post_id: str,
        update: dict[str, Any],
    ) -> Optional[Post]:
        oid = to_object_id(post_id)
        if oid is None:
            return None

        with self._translate_errors(operation):
            doc = await self._collection.find_one_and_update(
                {"_id": oid},
                update,
                return_document=ReturnDocument.AFTER,
            )

        return self._map_to_post(doc) if doc else None

    def _map_to_post(self, data: dict[str, Any]) -> Post:
        """Map a posts document to a Post model."""
        return Post(
            id=str(data["_id"]),
            creator_id=data["creatorID"],
            created_time=data["createdTime"],
            message=data["message"],
            updated_time=data.get("updatedTime"),
            links=data.get("links", []),
            shares=data.get("shares", []),
        )
