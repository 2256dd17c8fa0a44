"""
Users service implementation.

Gated lookups over the users collection and cascading deletes that remove
a user's posts (and sessions) before the user record itself.
"""

import logging
from typing import Optional

from modules.auth.guards import require_identity
from modules.auth.repository import SessionRepository
from modules.posts.repository import PostRepository
from shared.models import AuthenticatedUser

from .exceptions import NoUsersError, UserNotFoundError
from .interfaces import IUserService
from .models import User
from .repository import UserRepository

logger = logging.getLogger(__name__)

DELETE_ALL_USERS_MESSAGE = "Successfully deleted all users!"


class UserService(IUserService):
    """
    User service with MongoDB backend.

    Cascade deletes are not transactional. Posts are removed before the
    user, so an interrupted cascade leaves the user in place and can be
    retried to completion.
    """

    def __init__(
        self,
        users: UserRepository,
        posts: PostRepository,
        sessions: Optional[SessionRepository] = None,
    ):
        self._users = users
        self._posts = posts
        self._sessions = sessions

    async def get_me(self, identity: Optional[AuthenticatedUser]) -> User:
        user = require_identity(identity)

        found = await self._users.get_by_id(user.id)
        if found is None:
            raise UserNotFoundError(user.id)
        return found

    async def list_users(self, identity: Optional[AuthenticatedUser]) -> list[User]:
        require_identity(identity)

        users = await self._users.list_all()
        if not users:
            raise NoUsersError()
        return users

    async def get_user(self, identity: Optional[AuthenticatedUser], user_id: str) -> User:
        require_identity(identity)

        found = await self._users.get_by_id(user_id)
        if found is None:
            raise UserNotFoundError(user_id)
        return found

    async def delete_user(self, identity: Optional[AuthenticatedUser], user_id: str) -> User:
        require_identity(identity)

        user = await self._users.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        deleted_posts = await self._posts.delete_by_creator(user.id)
        if self._sessions is not None:
            await self._sessions.delete_for_user(user.id)
        await self._users.delete_by_id(user.id)

        logger.info("Deleted user %s and %d post(s)", user.id, deleted_posts)
        return user

    async def delete_all_users(self, identity: Optional[AuthenticatedUser]) -> str:
        require_identity(identity)

        deleted_posts = await self._posts.delete_all()
        if self._sessions is not None:
            await self._sessions.delete_all()
        deleted_users = await self._users.delete_all()

        if deleted_users == 0:
            raise NoUsersError()

        logger.info("Deleted all users (%d) and posts (%d)", deleted_users, deleted_posts)
        return DELETE_ALL_USERS_MESSAGE
