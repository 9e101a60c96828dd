"""
Ghost Ping Bot - Snapshot Models
================================

Immutable views of a deleted message, captured once when the delete event
fires.

DESIGN:
    discord.Message objects delivered to on_message_delete are the last
    cached state of the message. The snapshot copies what the detector
    needs (author, content, mentions, reply reference) and keeps the
    channel and guild handles for sending and reply resolution.
"""

from dataclasses import dataclass
from typing import Any, FrozenSet, Optional

import discord


# =============================================================================
# Constants
# =============================================================================

MESSAGE_LINK_FORMAT = "https://discord.com/channels/{guild_id}/{channel_id}/{message_id}"


# =============================================================================
# Author
# =============================================================================

@dataclass(frozen=True)
class SnapshotAuthor:
    """Identity of the deleted message's author."""

    id: int
    name: str
    mention: str
    bot: bool = False

    @classmethod
    def from_user(cls, user: discord.abc.User) -> "SnapshotAuthor":
        return cls(
            id=user.id,
            name=str(user),
            mention=user.mention,
            bot=bool(getattr(user, "bot", False)),
        )


# =============================================================================
# Reply Reference
# =============================================================================

@dataclass(frozen=True)
class ReplyReference:
    """
    The message a deleted message was replying to.

    Attributes:
        guild_id: Guild of the replied-to message.
        channel_id: Channel of the replied-to message.
        message_id: ID of the replied-to message.
    """

    guild_id: int
    channel_id: int
    message_id: int

    @property
    def jump_url(self) -> str:
        """Direct link to the replied-to message."""
        return MESSAGE_LINK_FORMAT.format(
            guild_id=self.guild_id,
            channel_id=self.channel_id,
            message_id=self.message_id,
        )

    @classmethod
    def from_message_reference(
        cls,
        reference: Optional[discord.MessageReference],
        fallback_guild_id: Optional[int] = None,
    ) -> Optional["ReplyReference"]:
        """
        Build from a discord.MessageReference.

        Args:
            reference: The message's reference, None if it has none.
            fallback_guild_id: Guild used when the reference carries none.

        Returns:
            ReplyReference, or None if the message was not a reply.
        """
        if reference is None or reference.message_id is None:
            return None

        # Forwards and system references also set message.reference
        if reference.type != discord.MessageReferenceType.reply:
            return None

        guild_id = reference.guild_id or fallback_guild_id
        if guild_id is None or reference.channel_id is None:
            return None

        return cls(
            guild_id=guild_id,
            channel_id=reference.channel_id,
            message_id=reference.message_id,
        )


# =============================================================================
# Deleted Message Snapshot
# =============================================================================

@dataclass(frozen=True)
class DeletedMessageSnapshot:
    """
    Last known state of a message at deletion time.

    Attributes:
        message_id: ID of the deleted message.
        author: Who sent it.
        content: Text content as delivered by Discord.
        mentioned_ids: User IDs directly mentioned in the message.
        channel: Channel the message was posted in (used for sending).
        guild: Guild the message belonged to, None in DMs.
        reply_reference: What the message replied to, if anything.
    """

    message_id: int
    author: SnapshotAuthor
    content: str
    mentioned_ids: FrozenSet[int]
    channel: Any
    guild: Optional[Any] = None
    reply_reference: Optional[ReplyReference] = None

    @property
    def guild_id(self) -> Optional[int]:
        return self.guild.id if self.guild is not None else None

    @property
    def channel_name(self) -> str:
        name = getattr(self.channel, "name", None)
        return f"#{name}" if name else str(getattr(self.channel, "id", "unknown"))

    @classmethod
    def from_message(cls, message: discord.Message) -> "DeletedMessageSnapshot":
        """
        Capture a snapshot from the deleted message.

        Mentions are read from message.mentions exactly once; a missing
        list is treated as no mentions.
        """
        guild = message.guild
        mentions = message.mentions or []

        return cls(
            message_id=message.id,
            author=SnapshotAuthor.from_user(message.author),
            content=message.content or "",
            mentioned_ids=frozenset(user.id for user in mentions),
            channel=message.channel,
            guild=guild,
            reply_reference=ReplyReference.from_message_reference(
                message.reference,
                fallback_guild_id=guild.id if guild is not None else None,
            ),
        )


__all__ = [
    "MESSAGE_LINK_FORMAT",
    "SnapshotAuthor",
    "ReplyReference",
    "DeletedMessageSnapshot",
]
