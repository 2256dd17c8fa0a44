"""
Users module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
from .models import User


@runtime_checkable
class IUserService(Protocol):
    """
    Interface for user operations.

    All operations require an authenticated identity.
    """

    async def get_me(self, identity: Optional[AuthenticatedUser]) -> User:
        """Get the current user's record."""
        ...

    async def list_users(self, identity: Optional[AuthenticatedUser]) -> list[User]:
        """
        Get all users.

        Raises:
            NoUsersError: If there are no users
        """
        ...

    async def get_user(self, identity: Optional[AuthenticatedUser], user_id: str) -> User:
        """
        Get a user by ID.

        Raises:
            UserNotFoundError: If no user has the ID
        """
        ...

    async def delete_user(self, identity: Optional[AuthenticatedUser], user_id: str) -> User:
        """
        Delete a user and everything they own.

        Returns:
            The user record as it was before deletion

        Raises:
            UserNotFoundError: If no user has the ID
        """
        ...

    async def delete_all_users(self, identity: Optional[AuthenticatedUser]) -> str:
        """
        Delete every user and every post.

        Raises:
            NoUsersError: If there were no users to delete
        """
        ...
