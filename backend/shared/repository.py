"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
MongoDB database access and providing shared utilities for data operations.
"""

from contextlib import contextmanager
from typing import Any, Generic, Iterator, Optional, TypeVar

from bson import ObjectId
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from .exceptions import DatabaseError


T = TypeVar("T")


def to_object_id(value: str) -> Optional[ObjectId]:
    """
    Convert a string id to an ObjectId.

    Returns None for strings that are not valid ObjectIds, so callers can
    treat malformed ids exactly like ids that do not exist.
    """
    if isinstance(value, ObjectId):
        return value
    if not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - MongoDB database access via self._db
    - The repository's own collection via self._collection
    - Translation of driver errors into DatabaseError

    Subclasses set `collection_name`, implement domain-specific data access
    methods and handle document-to-Pydantic model mapping internally.

    Example:
        class PostRepository(BaseRepository[Post]):
            collection_name = "posts"

            async def get_by_id(self, post_id: str) -> Optional[Post]:
                with self._translate_errors("get_post"):
                    doc = await self._collection.find_one({"_id": ObjectId(post_id)})
                return self._map_to_post(doc) if doc else None
    """

    collection_name: str = ""

    def __init__(self, db: AsyncDatabase[dict[str, Any]]) -> None:
        """
        Initialize the repository with a MongoDB database.

        Args:
            db: Database handle for the application database.
        """
        self._db = db

    @property
    def _collection(self) -> AsyncCollection[dict[str, Any]]:
        return self._db[self.collection_name]

    @contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        """Re-raise driver errors as DatabaseError so they never reach clients raw."""
        try:
            yield
        except PyMongoError as e:
            raise DatabaseError(
                f"Database error during {operation}",
                operation=operation,
                details={"collection": self.collection_name},
            ) from e
