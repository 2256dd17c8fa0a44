"""
Tests for shared models.
"""

import pytest
from pydantic import ValidationError

from shared.models import AuthenticatedUser


class TestAuthenticatedUser:
    """Tests for the AuthenticatedUser model in shared."""

    def test_create_with_required_fields(self):
        """Should create user with only required fields."""
        user = AuthenticatedUser(
            id="5dbff437f482e01d03fecd4b",
            email="test@example.com",
        )
        assert user.id == "5dbff437f482e01d03fecd4b"
        assert user.email == "test@example.com"
        assert user.first_name is None
        assert user.last_name is None

    def test_all_fields(self):
        """Should accept the session snapshot fields."""
        user = AuthenticatedUser(
            id="user-123",
            email="test@example.com",
            first_name="Test",
            last_name="Johnson",
        )
        assert user.first_name == "Test"
        assert user.last_name == "Johnson"

    def test_is_immutable(self):
        """AuthenticatedUser should be frozen."""
        user = AuthenticatedUser(id="user-123", email="test@example.com")
        with pytest.raises(ValidationError):
            user.id = "someone-else"

    def test_ignores_extra_fields(self):
        """Extra snapshot fields should be ignored."""
        user = AuthenticatedUser(id="user-123", email="test@example.com", password="hash")
        assert not hasattr(user, "password")

    def test_requires_id(self):
        """ID is required."""
        with pytest.raises(ValidationError):
            AuthenticatedUser(email="test@example.com")
