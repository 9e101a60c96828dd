"""
Ghost Ping Bot - Main Bot Class
===============================

Discord client that loads the event cogs and reports listener errors.
"""

import sys
from datetime import datetime

import discord
from discord.ext import commands

from src.core.logger import logger
from src.core.config import get_config
from src.utils.error_handler import ErrorHandler


# =============================================================================
# GhostBot Class
# =============================================================================

class GhostBot(commands.Bot):
    """
    Main Discord bot class.

    DESIGN:
    - Loads every cog in EVENT_COGS during setup_hook
    - Routes uncaught listener errors to ErrorHandler so one bad event
      never stops event handling
    """

    def __init__(self) -> None:
        self.config = get_config()

        intents = discord.Intents.default()
        intents.message_content = True

        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=intents,
            help_command=None,
        )

        self.start_time: datetime = datetime.now()
        self._ready_initialized: bool = False

        logger.info("Bot Instance Created")

    # =========================================================================
    # Setup Hook
    # =========================================================================

    async def setup_hook(self) -> None:
        """Load event cogs before connecting to the gateway."""
        from src.events import EVENT_COGS
        for cog in EVENT_COGS:
            try:
                await self.load_extension(cog)
                logger.debug(f"Event Cog Loaded: {cog.split('.')[-1]}")
            except commands.ExtensionError as e:
                logger.error("Failed to Load Event Cog", [("Cog", cog), ("Error", str(e))])

    # =========================================================================
    # On Ready
    # =========================================================================

    async def on_ready(self) -> None:
        if self._ready_initialized:
            logger.info("Bot Reconnected (skipping re-initialization)")
            return

        self._ready_initialized = True

        if not self.user:
            return

        if self.config.error_webhook_url:
            logger.set_webhook(self.config.error_webhook_url)

        logger.tree("BOT ONLINE", [
            ("Name", self.user.name),
            ("ID", str(self.user.id)),
            ("Guilds", str(len(self.guilds))),
            ("Ignored Channels", str(len(self.config.ignored_channel_ids))),
        ], emoji="🚀")

    # =========================================================================
    # Error Handling
    # =========================================================================

    async def on_error(self, event_method: str, /, *args, **kwargs) -> None:
        """Log any exception that escaped an event listener."""
        _, error, _ = sys.exc_info()
        if error is None:
            return

        ErrorHandler.handle(
            error,
            location=f"GhostBot.{event_method}",
            critical=True,
            event_args=args,
        )

    # =========================================================================
    # Shutdown
    # =========================================================================

    async def close(self) -> None:
        logger.info("Initiating Graceful Shutdown")
        await super().close()
        logger.tree("SHUTDOWN COMPLETE", [
            ("Uptime", str(datetime.now() - self.start_time)),
        ], emoji="🛑")


__all__ = ["GhostBot"]
