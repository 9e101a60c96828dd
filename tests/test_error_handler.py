"""
Tests for src/utils/error_handler.py and GhostBot.on_error
"""

import json

import discord
import pytest
from unittest.mock import patch

from src.services.ghost_ping import DeletedMessageSnapshot
from src.utils import error_handler
from src.utils.error_handler import ErrorContext, ErrorHandler


class TestCategorize:

    def test_discord_error(self, http_error):
        assert ErrorHandler.categorize_error(http_error(discord.Forbidden, 403)) == "discord"

    def test_network_error(self):
        assert ErrorHandler.categorize_error(ConnectionError("down")) == "api"

    def test_general_error(self):
        assert ErrorHandler.categorize_error(ValueError("bad")) == "general"

    def test_forbidden_suggestion(self, http_error):
        suggestion = ErrorHandler.get_recovery_suggestion(http_error(discord.Forbidden, 403))
        assert "permissions" in suggestion


class TestContext:

    def test_snapshot_context(self, mock_deleted_message):
        snap = DeletedMessageSnapshot.from_message(mock_deleted_message)
        context = ErrorContext.get_full_context(ValueError("x"), "here", snapshot=snap)

        assert context["location"] == "here"
        assert context["error_type"] == "ValueError"
        assert context["discord_context"]["author_id"] == snap.author.id
        assert context["discord_context"]["channel"] == "#general"


class TestHandle:

    def test_non_critical_logs_warning(self):
        with patch.object(error_handler.logger, "warning") as warning:
            ErrorHandler.handle(ValueError("boom"), location="test")
        warning.assert_called_once()
        assert "boom" in warning.call_args.args[0]

    def test_critical_stores_context(self, tmp_path, monkeypatch):
        monkeypatch.setattr(error_handler, "ERROR_DIR", tmp_path)

        try:
            raise RuntimeError("fatal")
        except RuntimeError as e:
            ErrorHandler.handle(e, location="test", critical=True)

        files = list(tmp_path.glob("error_*.json"))
        assert len(files) == 1
        data = json.loads(files[0].read_text())
        assert data["error_message"] == "fatal"
        assert "RuntimeError" in data["traceback"]


class TestBotOnError:

    @pytest.mark.asyncio
    async def test_listener_error_is_handled(self):
        from src.bot import GhostBot

        bot = GhostBot()
        with patch("src.bot.ErrorHandler.handle") as handle:
            try:
                raise KeyError("missing")
            except KeyError:
                await bot.on_error("on_message_delete")

        handle.assert_called_once()
        assert isinstance(handle.call_args.args[0], KeyError)
        assert handle.call_args.kwargs["location"] == "GhostBot.on_message_delete"
