"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
in-memory repositories with the same interface as the MongoDB ones, test
settings, a wired service container and a TestClient for the GraphQL API.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
import jwt  # PyJWT
from bson import ObjectId
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import ServiceContainer, get_container, reset_container
from modules.auth.models import Session
from modules.posts.models import Post, PostCreate
from modules.users.exceptions import UserAlreadyExistsError
from modules.users.models import User, UserCreate
from shared.config import Settings, get_settings
from shared.models import AuthenticatedUser


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only-0123456789"


# -----------------------------------------------------------------------------
# In-memory repositories
# -----------------------------------------------------------------------------


class InMemoryUserRepository:
    """Dict-backed stand-in for UserRepository."""

    def __init__(self) -> None:
        self.docs: dict[str, User] = {}

    async def create(self, data: UserCreate) -> User:
        if any(u.email == data.email for u in self.docs.values()):
            raise UserAlreadyExistsError(data.email)
        user = User(
            id=str(ObjectId()),
            email=data.email,
            password_hash=data.password_hash,
            first_name=data.first_name,
            last_name=data.last_name,
        )
        self.docs[user.id] = user
        return user

    async def get_by_id(self, user_id: str) -> Optional[User]:
        return self.docs.get(user_id)

    async def get_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.docs.values() if u.email == email), None)

    async def list_all(self) -> list[User]:
        return list(self.docs.values())

    async def delete_by_id(self, user_id: str) -> bool:
        return self.docs.pop(user_id, None) is not None

    async def delete_all(self) -> int:
        count = len(self.docs)
        self.docs.clear()
        return count


class InMemoryPostRepository:
    """Dict-backed stand-in for PostRepository."""

    def __init__(self) -> None:
        self.docs: dict[str, Post] = {}

    async def get_by_id(self, post_id: str) -> Optional[Post]:
        return self.docs.get(post_id)

    async def list_all(self) -> list[Post]:
        return list(self.docs.values())

    async def list_by_creator(self, creator_id: str) -> list[Post]:
        return [p for p in self.docs.values() if p.creator_id == creator_id]

    async def create(self, data: PostCreate) -> Post:
        post = Post(
            id=str(ObjectId()),
            creator_id=data.creator_id,
            created_time=data.created_time,
            message=data.message,
            links=list(data.links),
        )
        self.docs[post.id] = post
        return post

    async def update_content(
        self, post_id: str, message: str, links: list[str], updated_time: datetime
    ) -> Optional[Post]:
        post = self.docs.get(post_id)
        if post is None:
            return None
        post = post.model_copy(
            update={"message": message, "links": list(links), "updated_time": updated_time}
        )
        self.docs[post_id] = post
        return post

    async def add_share(
        self, post_id: str, user_id: str, updated_time: datetime
    ) -> Optional[Post]:
        post = self.docs.get(post_id)
        if post is None:
            return None
        shares = post.shares if user_id in post.shares else [*post.shares, user_id]
        post = post.model_copy(update={"shares": shares, "updated_time": updated_time})
        self.docs[post_id] = post
        return post

    async def delete_by_id(self, post_id: str) -> bool:
        return self.docs.pop(post_id, None) is not None

    async def delete_by_creator(self, creator_id: str) -> int:
        doomed = [pid for pid, p in self.docs.items() if p.creator_id == creator_id]
        for pid in doomed:
            del self.docs[pid]
        return len(doomed)

    async def delete_all(self) -> int:
        count = len(self.docs)
        self.docs.clear()
        return count


class InMemorySessionRepository:
    """Dict-backed stand-in for SessionRepository."""

    def __init__(self) -> None:
        self.docs: dict[str, Session] = {}

    async def create(
        self, user: AuthenticatedUser, lifetime_seconds: int, now: datetime
    ) -> Session:
        session = Session(
            id=f"session-{len(self.docs) + 1}-{ObjectId()}",
            user=user,
            created_at=now,
            expires_at=now + timedelta(seconds=lifetime_seconds),
        )
        self.docs[session.id] = session
        return session

    async def get(self, session_id: str) -> Optional[Session]:
        return self.docs.get(session_id)

    async def delete(self, session_id: str) -> bool:
        return self.docs.pop(session_id, None) is not None

    async def delete_for_user(self, user_id: str) -> int:
        doomed = [sid for sid, s in self.docs.items() if s.user.id == user_id]
        for sid in doomed:
            del self.docs[sid]
        return len(doomed)

    async def delete_all(self) -> int:
        count = len(self.docs)
        self.docs.clear()
        return count


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset the service container and settings cache around each test."""
    reset_container()
    get_settings.cache_clear()
    yield
    reset_container()
    get_settings.cache_clear()


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def post_repo() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def session_repo() -> InMemorySessionRepository:
    return InMemorySessionRepository()


@pytest.fixture
def auth_mode() -> str:
    """Identity mechanism under test. Override in a module to switch to tokens."""
    return "session"


@pytest.fixture
def test_settings(auth_mode: str) -> Settings:
    """Settings for tests, independent of the environment."""
    return Settings(
        jwt_secret=TEST_JWT_SECRET,
        jwt_expires_minutes=60,
        auth_mode=auth_mode,
        session_cookie_name="ebimumaykata",
        session_lifetime_seconds=3600,
        session_cookie_secure=False,
        bcrypt_rounds=10,
        mongo_uri="mongodb://localhost:27017",
        mongo_db_name="socialDeckTestDB",
    )


@pytest.fixture
def container(test_settings, user_repo, post_repo, session_repo) -> ServiceContainer:
    """Service container wired to the in-memory repositories."""
    return ServiceContainer(
        settings=test_settings,
        user_repository=user_repo,
        post_repository=post_repo,
        session_repository=session_repo,
    )


@pytest.fixture
def client(test_settings, container) -> TestClient:
    """
    TestClient for an app using the in-memory container.

    The lifespan is not run, so no database connection is attempted.
    The client keeps cookies between requests like a browser would.
    """
    app = create_app(test_settings)
    app.dependency_overrides[get_container] = lambda: container
    return TestClient(app)


@pytest.fixture
def make_token():
    """Factory for JWTs signed with the test secret."""

    def _make_token(
        user_id: str = "test-user-123",
        email: str = "test@example.com",
        expired: bool = False,
        secret: str = TEST_JWT_SECRET,
    ) -> str:
        now = datetime.now(timezone.utc)
        exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)
        payload = {
            "sub": user_id,
            "email": email,
            "exp": int(exp.timestamp()),
            "iat": int(now.timestamp()),
        }
        return jwt.encode(payload, secret, algorithm="HS256")

    return _make_token


@pytest.fixture
def graphql(client):
    """Post a GraphQL operation and return the decoded response body."""

    def _graphql(query: str, variables: Optional[dict] = None, headers: Optional[dict] = None):
        response = client.post(
            "/graphql",
            json={"query": query, "variables": variables or {}},
            headers=headers or {},
        )
        return response.json()

    return _graphql
