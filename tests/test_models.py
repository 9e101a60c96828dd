"""
Tests for src/services/ghost_ping/models.py

Covers snapshot capture from deleted discord messages.
"""

from unittest.mock import MagicMock

import discord
import pytest

from src.services.ghost_ping import DeletedMessageSnapshot, ReplyReference


class TestReplyReference:
    """Tests for ReplyReference."""

    def test_jump_url(self):
        ref = ReplyReference(guild_id=1, channel_id=2, message_id=3)
        assert ref.jump_url == "https://discord.com/channels/1/2/3"

    def test_none_when_not_a_reply(self):
        assert ReplyReference.from_message_reference(None, 1) is None

    def test_none_without_message_id(self, mock_reply_reference):
        mock_reply_reference.message_id = None
        assert ReplyReference.from_message_reference(mock_reply_reference, 1) is None

    def test_copies_reference_ids(self, mock_reply_reference):
        ref = ReplyReference.from_message_reference(mock_reply_reference, 42)
        assert ref == ReplyReference(
            guild_id=mock_reply_reference.guild_id,
            channel_id=mock_reply_reference.channel_id,
            message_id=mock_reply_reference.message_id,
        )

    def test_forward_is_not_a_reply(self, mock_reply_reference):
        mock_reply_reference.type = discord.MessageReferenceType.forward
        assert ReplyReference.from_message_reference(mock_reply_reference, 42) is None

    def test_missing_guild_uses_fallback(self, mock_reply_reference):
        mock_reply_reference.guild_id = None
        ref = ReplyReference.from_message_reference(mock_reply_reference, 42)
        assert ref.guild_id == 42

    def test_missing_guild_and_fallback(self, mock_reply_reference):
        mock_reply_reference.guild_id = None
        assert ReplyReference.from_message_reference(mock_reply_reference, None) is None


class TestSnapshotFromMessage:
    """Tests for DeletedMessageSnapshot.from_message."""

    def test_captures_message(self, mock_deleted_message, mock_author, mock_other_user):
        snap = DeletedMessageSnapshot.from_message(mock_deleted_message)

        assert snap.message_id == mock_deleted_message.id
        assert snap.author.id == mock_author.id
        assert snap.author.mention == mock_author.mention
        assert snap.author.bot is False
        assert snap.content == mock_deleted_message.content
        assert snap.mentioned_ids == frozenset({mock_other_user.id})
        assert snap.channel is mock_deleted_message.channel
        assert snap.guild is mock_deleted_message.guild
        assert snap.reply_reference is None

    def test_bot_flag(self, mock_deleted_message):
        mock_deleted_message.author.bot = True
        assert DeletedMessageSnapshot.from_message(mock_deleted_message).author.bot is True

    def test_duplicate_mentions_collapse(self, mock_deleted_message, user_factory):
        mock_deleted_message.mentions = [user_factory(5), user_factory(5), user_factory(6)]
        snap = DeletedMessageSnapshot.from_message(mock_deleted_message)
        assert snap.mentioned_ids == frozenset({5, 6})

    def test_missing_mentions_and_content(self, mock_deleted_message):
        mock_deleted_message.mentions = None
        mock_deleted_message.content = None
        snap = DeletedMessageSnapshot.from_message(mock_deleted_message)
        assert snap.mentioned_ids == frozenset()
        assert snap.content == ""

    def test_reply_reference(self, mock_deleted_message, mock_reply_reference):
        mock_deleted_message.reference = mock_reply_reference
        snap = DeletedMessageSnapshot.from_message(mock_deleted_message)
        assert snap.reply_reference.jump_url == (
            f"https://discord.com/channels/{mock_reply_reference.guild_id}"
            f"/{mock_reply_reference.channel_id}/{mock_reply_reference.message_id}"
        )

    def test_dm_has_no_guild(self, mock_deleted_message):
        mock_deleted_message.guild = None
        snap = DeletedMessageSnapshot.from_message(mock_deleted_message)
        assert snap.guild is None
        assert snap.guild_id is None

    def test_snapshot_is_immutable(self, mock_deleted_message):
        snap = DeletedMessageSnapshot.from_message(mock_deleted_message)
        with pytest.raises(AttributeError):
            snap.content = "edited"

    def test_channel_name(self, mock_deleted_message):
        snap = DeletedMessageSnapshot.from_message(mock_deleted_message)
        assert snap.channel_name == "#general"

    def test_channel_name_without_name(self, mock_deleted_message):
        mock_deleted_message.channel = MagicMock(spec=["id", "send"])
        mock_deleted_message.channel.id = 7
        snap = DeletedMessageSnapshot.from_message(mock_deleted_message)
        assert snap.channel_name == "7"
