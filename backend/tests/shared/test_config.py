"""Tests for shared/config.py."""

import pytest
from unittest.mock import patch
import os

from pydantic import ValidationError

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.app_name == "SocialDeck API"
        assert settings.debug is False
        assert settings.port == 7000
        assert settings.host == "0.0.0.0"
        assert settings.app_version == "0.1.0"
        assert settings.auth_mode == "session"
        assert settings.session_cookie_name == "ebimumaykata"
        assert settings.session_lifetime_seconds == 3600
        assert settings.jwt_algorithm == "HS256"
        assert settings.jwt_expires_minutes == 60
        assert settings.bcrypt_rounds == 10

    def test_loads_from_env(self):
        """Settings should load prefixed environment variables."""
        with patch.dict(os.environ, {
            "SOCIALDECK_DEBUG": "true",
            "SOCIALDECK_PORT": "9000",
            "SOCIALDECK_JWT_SECRET": "env-secret",
        }):
            settings = Settings(_env_file=None)
            assert settings.debug is True
            assert settings.port == 9000
            assert settings.jwt_secret == "env-secret"

    def test_ignores_unprefixed_env(self):
        """Unprefixed variables should not leak into settings."""
        with patch.dict(os.environ, {"PORT": "9999"}, clear=True):
            settings = Settings(_env_file=None)
            assert settings.port == 7000

    def test_loads_auth_mode_from_env(self):
        """Auth mode should be switchable to bearer tokens."""
        with patch.dict(os.environ, {"SOCIALDECK_AUTH_MODE": "token"}):
            settings = Settings(_env_file=None)
            assert settings.auth_mode == "token"

    def test_rejects_unknown_auth_mode(self):
        """Only session and token modes exist."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, auth_mode="both")

    @pytest.mark.parametrize("rounds", [4, 9, 32])
    def test_rejects_weak_or_invalid_bcrypt_rounds(self, rounds):
        """Bcrypt cost factor below 10 (or above bcrypt's max) is rejected."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, bcrypt_rounds=rounds)


class TestGetSettings:
    def test_returns_cached_instance(self):
        """get_settings should return the same instance on repeated calls."""
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self):
        """Clearing the cache should produce a fresh instance."""
        first = get_settings()
        get_settings.cache_clear()
        assert get_settings() is not first
