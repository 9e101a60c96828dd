"""
Ghost Ping Bot - Notifier
=========================

Builds and sends the ghost ping notification for an eligible snapshot.

DESIGN:
    Plain messages are sent when the deleted message was not a reply.
    Replies get an embed that names the replied-to author and links the
    replied-to message. Enrichment runs two awaited steps in order:

    1. Resolve the reply channel in the snapshot's guild
    2. Fetch the replied-to message from that channel

    If either step fails the notifier falls back to the plain message.
    Errors from channel.send are not caught here; the caller decides
    how to report them.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Iterable

import discord

from src.core.config import EmbedColors, NY_TZ
from src.core.logger import logger

from .eligibility import others_mentioned
from .models import DeletedMessageSnapshot, ReplyReference


# =============================================================================
# Constants
# =============================================================================

NOTIFICATION_TITLE = "👻 Ghost Ping Detected"
MESSAGE_MAX_LENGTH = 2000
EMBED_FIELD_MAX_LENGTH = 1024
MENTIONS_MAX_LENGTH = 500
EMPTY_CONTENT = "*(no text content)*"

REPLY_TO_FIELD = "Reply to"
MESSAGE_REPLIED_TO_FIELD = "Message replied to"


# =============================================================================
# Errors
# =============================================================================

class GhostPingError(Exception):
    """Base error for reply-context enrichment."""

    pass


class ResolutionFailure(GhostPingError):
    """The replied-to channel could not be resolved in the guild."""

    pass


class FetchFailure(GhostPingError):
    """The replied-to message could not be fetched."""

    pass


# =============================================================================
# Reply Context
# =============================================================================

@dataclass(frozen=True)
class ReplyContext:
    """Replied-to message together with the reference used to find it."""

    reference: ReplyReference
    message: Any

    @property
    def author_mention(self) -> str:
        author = getattr(self.message, "author", None)
        return author.mention if author is not None else "Unknown"

    @property
    def jump_url(self) -> str:
        return self.reference.jump_url


# =============================================================================
# Helpers
# =============================================================================

def truncate(text: str, limit: int) -> str:
    """Cut text to limit characters, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[: max(limit - 3, 0)] + "..."


def quote(text: str) -> str:
    """Render text as a Discord block quote."""
    return "\n".join(f"> {line}" for line in text.splitlines() or [""])


def format_mentions(user_ids: Iterable[int], limit: int = MENTIONS_MAX_LENGTH) -> str:
    """
    Join user mentions, listing as many as fit in limit characters.

    Mentions that don't fit are summarized as "+N more".
    """
    mentions = [f"<@{user_id}>" for user_id in sorted(user_ids)]
    for shown in range(len(mentions), 0, -1):
        text = ", ".join(mentions[:shown])
        hidden = len(mentions) - shown
        if hidden:
            text += f", +{hidden} more"
        if len(text) <= limit:
            return text
    return truncate(f"+{len(mentions)} users", limit)


# =============================================================================
# Notifier
# =============================================================================

class GhostPingNotifier:
    """
    Sends ghost ping notifications to the channel a message was deleted from.

    Attributes:
        content_max_length: Max characters of deleted content quoted back.
    """

    def __init__(self, content_max_length: int = 1000) -> None:
        self.content_max_length = content_max_length

    # =========================================================================
    # Public API
    # =========================================================================

    async def notify(self, snapshot: DeletedMessageSnapshot) -> discord.Message:
        """
        Send the notification for an eligible snapshot.

        Args:
            snapshot: Snapshot that already passed is_ghost_ping().

        Returns:
            The message sent to snapshot.channel.

        Raises:
            discord.HTTPException: If the notification itself can't be sent.
        """
        if snapshot.reply_reference is None:
            return await snapshot.channel.send(content=self.build_plain(snapshot))

        try:
            context = await self.resolve_reply_context(snapshot)
        except GhostPingError as e:
            logger.warning(
                f"Reply Context Unavailable ({type(e).__name__}): {e} - sending plain notification"
            )
            return await snapshot.channel.send(content=self.build_plain(snapshot))

        return await snapshot.channel.send(embed=self.build_embed(snapshot, context))

    async def resolve_reply_context(self, snapshot: DeletedMessageSnapshot) -> ReplyContext:
        """
        Resolve the channel and fetch the message the snapshot replied to.

        Raises:
            ResolutionFailure: Channel unknown, inaccessible or in another guild.
            FetchFailure: The replied-to message can't be fetched.
        """
        reference = snapshot.reply_reference
        if reference is None:
            raise ResolutionFailure("message was not a reply")

        guild = snapshot.guild
        if guild is None:
            raise ResolutionFailure("message has no guild")
        if guild.id != reference.guild_id:
            raise ResolutionFailure(
                f"reply points to guild {reference.guild_id}, message was in {guild.id}"
            )

        channel = guild.get_channel_or_thread(reference.channel_id)
        if channel is None:
            raise ResolutionFailure(f"channel {reference.channel_id} not found")

        try:
            message = await channel.fetch_message(reference.message_id)
        except discord.NotFound:
            raise FetchFailure(f"message {reference.message_id} not found")
        except discord.Forbidden:
            raise FetchFailure(f"no access to message {reference.message_id}")
        except discord.HTTPException as e:
            raise FetchFailure(f"fetching message {reference.message_id} failed: {e}")

        return ReplyContext(reference=reference, message=message)

    # =========================================================================
    # Payload Builders
    # =========================================================================

    def build_plain(self, snapshot: DeletedMessageSnapshot) -> str:
        """Plain text notification naming the author and the pinged users."""
        content = truncate(snapshot.content, self.content_max_length)
        body = quote(content) if content else EMPTY_CONTENT
        mentioned = format_mentions(others_mentioned(snapshot))

        header = (
            f"**{NOTIFICATION_TITLE}**\n"
            f"{snapshot.author.mention} mentioned {mentioned} and deleted their message:\n"
        )
        return truncate(header + body, MESSAGE_MAX_LENGTH)

    def build_embed(self, snapshot: DeletedMessageSnapshot, context: ReplyContext) -> discord.Embed:
        """Embed notification with the reply context fields."""
        limit = min(self.content_max_length, EMBED_FIELD_MAX_LENGTH)
        content = truncate(snapshot.content, limit) or EMPTY_CONTENT

        embed = discord.Embed(
            title=NOTIFICATION_TITLE,
            color=EmbedColors.GHOST_PING,
            timestamp=datetime.now(NY_TZ),
        )
        embed.add_field(name="Author", value=snapshot.author.mention, inline=True)
        embed.add_field(
            name="Mentioned",
            value=format_mentions(others_mentioned(snapshot), EMBED_FIELD_MAX_LENGTH),
            inline=True,
        )
        embed.add_field(name="Message", value=content, inline=False)
        embed.add_field(name=REPLY_TO_FIELD, value=context.author_mention, inline=True)
        embed.add_field(name=MESSAGE_REPLIED_TO_FIELD, value=context.jump_url, inline=True)
        return embed


__all__ = [
    "GhostPingNotifier",
    "GhostPingError",
    "ResolutionFailure",
    "FetchFailure",
    "ReplyContext",
    "REPLY_TO_FIELD",
    "MESSAGE_REPLIED_TO_FIELD",
]
