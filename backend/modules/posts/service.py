"""
Posts service implementation.

Every operation is gated on an authenticated identity; updates and
single deletes are restricted to the post's creator.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from modules.auth.guards import is_owner, require_identity
from shared.models import AuthenticatedUser

from .exceptions import NoPostsError, PostNotFoundError, PostOwnershipError
from .interfaces import IPostService
from .models import Post, PostCreate
from .repository import PostRepository

logger = logging.getLogger(__name__)

DELETE_ALL_POSTS_MESSAGE = "Successfully deleted all posts!"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PostService(IPostService):
    """Post service with MongoDB backend."""

    def __init__(
        self,
        posts: PostRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._posts = posts
        self._clock = clock

    async def list_posts(self, identity: Optional[AuthenticatedUser]) -> list[Post]:
        require_identity(identity)

        posts = await self._posts.list_all()
        if not posts:
            raise NoPostsError()
        return posts

    async def list_user_posts(
        self,
        identity: Optional[AuthenticatedUser],
        user_id: str,
    ) -> list[Post]:
        require_identity(identity)
        return await self._posts.list_by_creator(user_id)

    async def get_post(self, identity: Optional[AuthenticatedUser], post_id: str) -> Post:
        require_identity(identity)
        return await self._get_existing(post_id)

    async def create_post(
        self,
        identity: Optional[AuthenticatedUser],
        message: str,
        links: list[str],
    ) -> Post:
        user = require_identity(identity)

        post = await self._posts.create(
            PostCreate(
                creator_id=user.id,
                created_time=self._clock(),
                message=message,
                links=links,
            )
        )
        logger.info("User %s created post %s", user.id, post.id)
        return post

    async def update_post(
        self,
        identity: Optional[AuthenticatedUser],
        post_id: str,
        message: str,
        links: list[str],
    ) -> Post:
        user = require_identity(identity)

        existing = await self._get_existing(post_id)
        if not is_owner(user, existing.creator_id):
            raise PostOwnershipError(post_id, user.id, "update")

        updated = await self._posts.update_content(post_id, message, links, self._clock())
        if updated is None:
            # Deleted between the lookup and the update
            raise PostNotFoundError(post_id)
        return updated

    async def share_post(self, identity: Optional[AuthenticatedUser], post_id: str) -> Post:
        user = require_identity(identity)

        shared = await self._posts.add_share(post_id, user.id, self._clock())
        if shared is None:
            raise PostNotFoundError(post_id)
        return shared

    async def delete_post(self, identity: Optional[AuthenticatedUser], post_id: str) -> Post:
        user = require_identity(identity)

        existing = await self._get_existing(post_id)
        if not is_owner(user, existing.creator_id):
            raise PostOwnershipError(post_id, user.id, "delete")

        await self._posts.delete_by_id(post_id)
        logger.info("User %s deleted post %s", user.id, post_id)
        return existing

    async def delete_all_posts(self, identity: Optional[AuthenticatedUser]) -> str:
        require_identity(identity)

        deleted = await self._posts.delete_all()
        if deleted == 0:
            raise NoPostsError()

        logger.info("Deleted all posts (%d)", deleted)
        return DELETE_ALL_POSTS_MESSAGE

    async def _get_existing(self, post_id: str) -> Post:
        post = await self._posts.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return post
