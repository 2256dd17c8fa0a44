"""Tests for shared/database.py."""

import pytest
from unittest.mock import AsyncMock, MagicMock, call, patch

from pymongo.errors import ServerSelectionTimeoutError

from shared.database import (
    POSTS_COLLECTION,
    SESSIONS_COLLECTION,
    USERS_COLLECTION,
    close_mongo_client,
    ensure_indexes,
    get_database,
    get_mongo_client,
    ping_database,
    reset_client_cache,
)


class TestMongoClient:
    def setup_method(self):
        """Reset cache before each test."""
        reset_client_cache()

    def teardown_method(self):
        reset_client_cache()

    @patch("shared.database.AsyncMongoClient")
    @patch("shared.database.get_settings")
    def test_get_mongo_client_creates_client(self, mock_settings, mock_client_cls):
        """Should create a tz-aware client from the configured URI."""
        mock_settings.return_value.mongo_uri = "mongodb://db.test:27017"

        client = get_mongo_client()

        mock_client_cls.assert_called_once_with("mongodb://db.test:27017", tz_aware=True)
        assert client is mock_client_cls.return_value

    @patch("shared.database.AsyncMongoClient")
    @patch("shared.database.get_settings")
    def test_get_mongo_client_caches_client(self, mock_settings, mock_client_cls):
        """Should cache the client and not recreate it."""
        mock_settings.return_value.mongo_uri = "mongodb://db.test:27017"

        client1 = get_mongo_client()
        client2 = get_mongo_client()

        mock_client_cls.assert_called_once()
        assert client1 is client2

    @patch("shared.database.get_settings")
    def test_get_mongo_client_raises_without_config(self, mock_settings):
        """Should raise if configuration is missing."""
        mock_settings.return_value.mongo_uri = ""

        with pytest.raises(RuntimeError) as exc_info:
            get_mongo_client()

        assert "SOCIALDECK_MONGO_URI" in str(exc_info.value)

    @patch("shared.database.AsyncMongoClient")
    @patch("shared.database.get_settings")
    def test_get_database_uses_configured_name(self, mock_settings, mock_client_cls):
        """Should select the configured database."""
        mock_settings.return_value.mongo_uri = "mongodb://db.test:27017"
        mock_settings.return_value.mongo_db_name = "socialDeckDB"

        db = get_database()

        mock_client_cls.return_value.__getitem__.assert_called_once_with("socialDeckDB")
        assert db is mock_client_cls.return_value.__getitem__.return_value

    @pytest.mark.asyncio
    @patch("shared.database.AsyncMongoClient")
    @patch("shared.database.get_settings")
    async def test_close_mongo_client(self, mock_settings, mock_client_cls):
        """Should close the cached client and forget it."""
        mock_settings.return_value.mongo_uri = "mongodb://db.test:27017"
        mock_client_cls.return_value.close = AsyncMock()

        get_mongo_client()
        await close_mongo_client()

        mock_client_cls.return_value.close.assert_awaited_once()
        get_mongo_client()
        assert mock_client_cls.call_count == 2

    @pytest.mark.asyncio
    async def test_close_without_client_is_noop(self):
        """Closing when nothing was opened should do nothing."""
        await close_mongo_client()


class TestEnsureIndexes:
    @pytest.mark.asyncio
    async def test_creates_expected_indexes(self):
        """Should create the unique email, creator and session TTL indexes."""
        collections = {
            USERS_COLLECTION: MagicMock(create_index=AsyncMock()),
            POSTS_COLLECTION: MagicMock(create_index=AsyncMock()),
            SESSIONS_COLLECTION: MagicMock(create_index=AsyncMock()),
        }
        db = MagicMock()
        db.__getitem__.side_effect = collections.__getitem__

        await ensure_indexes(db)

        collections[USERS_COLLECTION].create_index.assert_awaited_once_with(
            [("email", 1)], unique=True
        )
        collections[POSTS_COLLECTION].create_index.assert_awaited_once_with(
            [("creatorID", 1)]
        )
        collections[SESSIONS_COLLECTION].create_index.assert_awaited_once_with(
            [("expiresAt", 1)], expireAfterSeconds=0
        )


class TestPingDatabase:
    @pytest.mark.asyncio
    @patch("shared.database.get_mongo_client")
    async def test_ping_success(self, mock_get_client):
        """Should return True when the server answers."""
        mock_get_client.return_value.admin.command = AsyncMock(return_value={"ok": 1})

        assert await ping_database() is True
        mock_get_client.return_value.admin.command.assert_awaited_once_with("ping")

    @pytest.mark.asyncio
    @patch("shared.database.get_mongo_client")
    async def test_ping_failure(self, mock_get_client):
        """Should return False when the server is unreachable."""
        mock_get_client.return_value.admin.command = AsyncMock(
            side_effect=ServerSelectionTimeoutError("no servers")
        )

        assert await ping_database() is False
