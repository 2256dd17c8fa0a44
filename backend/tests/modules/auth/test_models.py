"""Tests for auth models."""

from datetime import datetime, timedelta, timezone

from modules.auth.models import AuthResult, JWTPayload, Session
from shared.models import AuthenticatedUser


class TestJWTPayload:
    def test_to_identity(self):
        payload = JWTPayload(sub="user-123", email="a@example.com", exp=2, iat=1)
        assert payload.to_identity() == AuthenticatedUser(id="user-123", email="a@example.com")

    def test_extra_claims_ignored(self):
        """Unknown claims should not break decoding."""
        payload = JWTPayload.model_validate(
            {"sub": "u", "email": "a@example.com", "exp": 2, "iat": 1, "aud": "x"}
        )
        assert not hasattr(payload, "aud")


class TestSession:
    def _session(self, expires_at: datetime) -> Session:
        return Session(
            id="abc",
            user=AuthenticatedUser(id="u", email="a@example.com"),
            created_at=expires_at - timedelta(hours=1),
            expires_at=expires_at,
        )

    def test_not_expired_before_expiry(self):
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert self._session(now + timedelta(seconds=1)).is_expired(now) is False

    def test_expired_at_expiry(self):
        """A session is expired from its expiry instant onwards."""
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert self._session(now).is_expired(now) is True
        assert self._session(now - timedelta(seconds=1)).is_expired(now) is True


class TestAuthResult:
    def test_holds_token_user_and_session(self):
        user = AuthenticatedUser(id="u", email="a@example.com")
        now = datetime(2024, 1, 1, tzinfo=timezone.utc)
        session = Session(id="s", user=user, created_at=now, expires_at=now)

        result = AuthResult(token="t", user=user, session=session)

        assert result.token == "t"
        assert result.session.user == user
