"""
Ghost Ping Bot - Test Fixtures
==============================

Shared fixtures for all tests.
"""

import os
import sys
import discord
import pytest
from pathlib import Path
from unittest.mock import MagicMock, AsyncMock

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Set up test environment before importing modules
os.environ.setdefault("DISCORD_TOKEN", "test-token")


AUTHOR_ID = 123456789
OTHER_USER_ID = 328194044587147278
GUILD_ID = 328194044587147279
CHANNEL_ID = 555666777
REPLY_CHANNEL_ID = 328194044587147277
REPLY_MESSAGE_ID = 328194044587147280


def make_user(user_id: int, bot: bool = False) -> MagicMock:
    """Create a mock Discord user."""
    user = MagicMock()
    user.id = user_id
    user.name = f"user{user_id}"
    user.mention = f"<@{user_id}>"
    user.bot = bot
    return user


def make_http_error(cls, status: int = 404, text: str = "Unknown Message"):
    """Build a discord.py HTTP exception without a real response."""
    response = MagicMock()
    response.status = status
    response.reason = text
    return cls(response, text)


@pytest.fixture(autouse=True)
def fresh_config():
    """Reload config from the environment for every test."""
    from src.core.config import reset_config

    reset_config()
    yield
    reset_config()


@pytest.fixture
def mock_author():
    return make_user(AUTHOR_ID)


@pytest.fixture
def mock_other_user():
    return make_user(OTHER_USER_ID)


@pytest.fixture
def mock_replied_author():
    return make_user(444555666)


@pytest.fixture
def mock_reply_channel():
    """Channel that holds the replied-to message."""
    channel = MagicMock()
    channel.id = REPLY_CHANNEL_ID
    channel.name = "help"
    channel.fetch_message = AsyncMock()
    return channel


@pytest.fixture
def mock_discord_guild(mock_reply_channel):
    """Create a mock Discord guild."""
    guild = MagicMock()
    guild.id = GUILD_ID
    guild.name = "Test Server"
    guild.get_channel_or_thread = MagicMock(return_value=mock_reply_channel)
    return guild


@pytest.fixture
def mock_text_channel(mock_discord_guild):
    """Channel the deleted message was posted in."""
    channel = MagicMock()
    channel.id = CHANNEL_ID
    channel.name = "general"
    channel.guild = mock_discord_guild
    channel.send = AsyncMock(return_value=MagicMock(id=111222333))
    return channel


@pytest.fixture
def mock_deleted_message(mock_author, mock_other_user, mock_text_channel, mock_discord_guild):
    """A deleted message from a regular user that pinged someone else."""
    message = MagicMock()
    message.id = 999000111
    message.author = mock_author
    message.content = f"Hey <@{OTHER_USER_ID}>!"
    message.mentions = [mock_other_user]
    message.channel = mock_text_channel
    message.guild = mock_discord_guild
    message.reference = None
    return message


@pytest.fixture
def mock_reply_reference():
    """discord.MessageReference-like object pointing at the replied message."""
    reference = MagicMock()
    reference.type = discord.MessageReferenceType.reply
    reference.guild_id = GUILD_ID
    reference.channel_id = REPLY_CHANNEL_ID
    reference.message_id = REPLY_MESSAGE_ID
    return reference


@pytest.fixture
def mock_replied_message(mock_replied_author, mock_reply_channel, mock_discord_guild):
    """The message the deleted message replied to."""
    message = MagicMock()
    message.id = REPLY_MESSAGE_ID
    message.author = mock_replied_author
    message.channel = mock_reply_channel
    message.guild = mock_discord_guild
    return message


@pytest.fixture
def mock_bot():
    bot = MagicMock()
    bot.add_cog = AsyncMock()
    return bot


@pytest.fixture
def user_factory():
    return make_user


@pytest.fixture
def http_error():
    return make_http_error
