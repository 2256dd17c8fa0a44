"""
Posts module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from shared.models import AuthenticatedUser
from .models import Post


@runtime_checkable
class IPostService(Protocol):
    """
    Interface for post operations.

    All operations require an authenticated identity. Posts are always
    created on behalf of that identity.
    """

    async def list_posts(self, identity: Optional[AuthenticatedUser]) -> list[Post]:
        """
        Get all posts.

        Raises:
            NoPostsError: If there are no posts
        """
        ...

    async def list_user_posts(
        self,
        identity: Optional[AuthenticatedUser],
        user_id: str,
    ) -> list[Post]:
        """Get the posts created by a user (possibly empty)."""
        ...

    async def get_post(self, identity: Optional[AuthenticatedUser], post_id: str) -> Post:
        """
        Get a post by ID.

        Raises:
            PostNotFoundError: If no post has the ID
        """
        ...

    async def create_post(
        self,
        identity: Optional[AuthenticatedUser],
        message: str,
        links: list[str],
    ) -> Post:
        """Create a post owned by the caller."""
        ...

    async def update_post(
        self,
        identity: Optional[AuthenticatedUser],
        post_id: str,
        message: str,
        links: list[str],
    ) -> Post:
        """
        Replace a post's message and links.

        Raises:
            PostNotFoundError: If no post has the ID
            PostOwnershipError: If the caller did not create the post
        """
        ...

    async def share_post(self, identity: Optional[AuthenticatedUser], post_id: str) -> Post:
        """
        Add the caller to a post's share set.

        Raises:
            PostNotFoundError: If no post has the ID
        """
        ...

    async def delete_post(self, identity: Optional[AuthenticatedUser], post_id: str) -> Post:
        """
        Delete a post.

        Returns:
            The post as it was before deletion

        Raises:
            PostNotFoundError: If no post has the ID
            PostOwnershipError: If the caller did not create the post
        """
        ...

    async def delete_all_posts(self, identity: Optional[AuthenticatedUser]) -> str:
        """
        Delete every post.

        Raises:
            NoPostsError: If there were no posts to delete
        """
        ...
