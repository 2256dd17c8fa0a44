"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING, Optional

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.auth.repository import SessionRepository
    from modules.posts.interfaces import IPostService
    from modules.posts.repository import PostRepository
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository


class ServiceContainer:
    """
    Container for all service instances.

    This class manages the lifecycle of service instances and their
    dependencies. Services are created lazily on first access.

    All services are cached as singletons within the container.
    Repositories can be passed in to run the services against other
    storage (tests use in-memory fakes).
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        user_repository: "UserRepository | None" = None,
        post_repository: "PostRepository | None" = None,
        session_repository: "SessionRepository | None" = None,
    ) -> None:
        self._settings = settings
        self._user_repository = user_repository
        self._post_repository = post_repository
        self._session_repository = session_repository
        self._auth_service: "IAuthService | None" = None
        self._user_service: "IUserService | None" = None
        self._post_service: "IPostService | None" = None

    @property
    def settings(self) -> Settings:
        """Get the settings this container was built with."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def user_repository(self) -> "UserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            from shared.database import get_database
            self._user_repository = UserRepository(get_database())
        return self._user_repository

    @property
    def post_repository(self) -> "PostRepository":
        """Get the post repository instance."""
        if self._post_repository is None:
            from modules.posts.repository import PostRepository
            from shared.database import get_database
            self._post_repository = PostRepository(get_database())
        return self._post_repository

    @property
    def session_repository(self) -> "SessionRepository":
        """Get the session repository instance."""
        if self._session_repository is None:
            from modules.auth.repository import SessionRepository
            from shared.database import get_database
            self._session_repository = SessionRepository(get_database())
        return self._session_repository

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.passwords import PasswordHasher
            from modules.auth.service import AuthService
            from modules.auth.tokens import TokenService

            settings = self.settings
            self._auth_service = AuthService(
                users=self.user_repository,
                sessions=self.session_repository,
                tokens=TokenService(
                    secret=settings.jwt_secret,
                    algorithm=settings.jwt_algorithm,
                    expires_minutes=settings.jwt_expires_minutes,
                ),
                passwords=PasswordHasher(rounds=settings.bcrypt_rounds),
                session_lifetime_seconds=settings.session_lifetime_seconds,
            )
        return self._auth_service

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(
                users=self.user_repository,
                posts=self.post_repository,
                sessions=self.session_repository,
            )
        return self._user_service

    @property
    def posts(self) -> "IPostService":
        """Get the post service instance."""
        if self._post_service is None:
            from modules.posts.service import PostService
            self._post_service = PostService(posts=self.post_repository)
        return self._post_service

    def reset(self) -> None:
        """
        Reset all cached services.

        Repositories passed to the constructor are kept; lazily built
        ones are dropped along with the services.
        """
        self._auth_service = None
        self._user_service = None
        self._post_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    This clears the cached container, so the next call to get_container()
    will create a fresh container with new service instances.

    Primarily used for testing.
    """
    global _container
    _container = None
