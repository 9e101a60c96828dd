"""
Ghost Ping Bot - Ghost Ping Events
==================================

Listens for deleted messages and reports ghost pings.

DESIGN:
    Each delete event is handled on its own: snapshot -> eligibility ->
    notification. Nothing is kept between events.
"""

from typing import TYPE_CHECKING

import discord
from discord.ext import commands

from src.core.config import get_config
from src.core.logger import logger
from src.services.ghost_ping import (
    DeletedMessageSnapshot,
    GhostPingNotifier,
    is_ghost_ping,
    others_mentioned,
)
from src.utils.error_handler import ErrorHandler

if TYPE_CHECKING:
    from src.bot import GhostBot


class GhostPingEvents(commands.Cog):
    """Message delete listener for ghost ping detection."""

    def __init__(self, bot: "GhostBot") -> None:
        self.bot = bot
        self.config = get_config()
        self.notifier = GhostPingNotifier(content_max_length=self.config.content_max_length)

    @commands.Cog.listener()
    async def on_message_delete(self, message: discord.Message) -> None:
        """
        Event handler for deleted messages.

        DESIGN: Skips before doing any work:
        1. DMs (no guild)
        2. Ignored channels
        3. Messages that are not ghost pings
        """
        if message.guild is None:
            return

        if message.channel.id in self.config.ignored_channel_ids:
            return

        snapshot = DeletedMessageSnapshot.from_message(message)
        if not is_ghost_ping(snapshot):
            return

        await self.handle_ghost_ping(snapshot)

    async def handle_ghost_ping(self, snapshot: DeletedMessageSnapshot) -> None:
        """Send the notification, logging it or the send failure."""
        logger.tree("Ghost Ping Detected", [
            ("Author", f"{snapshot.author.name} ({snapshot.author.id})"),
            ("Channel", snapshot.channel_name),
            ("Mentioned", ", ".join(str(i) for i in sorted(others_mentioned(snapshot)))),
            ("Reply", snapshot.reply_reference.jump_url if snapshot.reply_reference else "No"),
        ], emoji="👻")

        try:
            await self.notifier.notify(snapshot)
        except discord.HTTPException as e:
            ErrorHandler.handle(
                e,
                location="GhostPingEvents.handle_ghost_ping",
                snapshot=snapshot,
            )


async def setup(bot: "GhostBot") -> None:
    """Load the GhostPingEvents cog."""
    await bot.add_cog(GhostPingEvents(bot))
    logger.tree("Ghost Ping Events Loaded", [
        ("Events", "on_message_delete"),
    ], emoji="👻")


__all__ = ["GhostPingEvents", "setup"]
