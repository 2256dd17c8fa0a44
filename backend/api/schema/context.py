"""
Per-request GraphQL context.

The identity is resolved once when the context is built and then passed
explicitly to every service call, so nothing about the acting user is
ever stored outside the request.
"""

from typing import Optional

from fastapi import Depends, Request
from strawberry.fastapi import BaseContext

from modules.auth.interfaces import IAuthService
from modules.auth.models import Session
from modules.posts.interfaces import IPostService
from modules.users.interfaces import IUserService
from shared.config import Settings
from shared.models import AuthenticatedUser

from ..dependencies import ServiceContainer, get_container
from ..middleware.auth import get_optional_identity, get_session_id


class GraphQLContext(BaseContext):
    """
    Context available to resolvers as `info.context`.

    `request` and `response` are filled in by the GraphQL router; cookies
    set on `response` are copied onto the HTTP response.
    """

    def __init__(
        self,
        identity: Optional[AuthenticatedUser],
        session_id: Optional[str],
        settings: Settings,
        auth: IAuthService,
        users: IUserService,
        posts: IPostService,
    ) -> None:
        super().__init__()
        self.identity = identity
        self.session_id = session_id
        self.settings = settings
        self.auth = auth
        self.users = users
        self.posts = posts

    def start_session(self, session: Session) -> None:
        """Hand the session cookie to the client."""
        settings = self.settings
        self.response.set_cookie(
            key=settings.session_cookie_name,
            value=session.id,
            max_age=settings.session_lifetime_seconds,
            path="/",
            secure=settings.session_cookie_secure,
            httponly=settings.session_cookie_httponly,
            samesite="lax",
        )
        self.session_id = session.id

    def end_session(self) -> None:
        """Clear the session cookie on the client."""
        settings = self.settings
        self.response.delete_cookie(
            key=settings.session_cookie_name,
            path="/",
            secure=settings.session_cookie_secure,
            httponly=settings.session_cookie_httponly,
            samesite="lax",
        )
        self.session_id = None


async def get_context(
    request: Request,
    identity: Optional[AuthenticatedUser] = Depends(get_optional_identity),
    container: ServiceContainer = Depends(get_container),
) -> GraphQLContext:
    """Build the context for a GraphQL request."""
    return GraphQLContext(
        identity=identity,
        session_id=get_session_id(request, container),
        settings=container.settings,
        auth=container.auth,
        users=container.users,
        posts=container.posts,
    )
