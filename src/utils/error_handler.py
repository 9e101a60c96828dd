"""
Ghost Ping Bot - Error Handler
==============================

Logs errors with context so a failed event never stops the bot.

Features:
- Error categorization (Discord, API, general)
- Recovery suggestions in the log line
- Deleted-message context (author, channel, content preview)
- Critical error context saved as JSON under logs/errors/
"""

import json
import sys
import traceback
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

import discord

from src.core.logger import logger


ERROR_DIR = Path("logs/errors")


class ErrorContext:
    """Captures and formats detailed error context"""

    @staticmethod
    def get_full_context(e: Exception, location: str, **kwargs) -> Dict[str, Any]:
        """
        Get comprehensive error context.

        Args:
            e: The exception
            location: Where the error occurred
            **kwargs: Additional context (snapshot, message, etc.)

        Returns:
            Dictionary with full error context
        """
        context = {
            'timestamp': datetime.now().isoformat(),
            'location': location,
            'error_type': type(e).__name__,
            'error_message': str(e),
            'traceback': ''.join(traceback.format_exception(type(e), e, e.__traceback__)),
            'python_version': sys.version,
            'additional_context': {k: str(v)[:100] for k, v in kwargs.items()},
        }

        snapshot = kwargs.get('snapshot')
        if snapshot is not None:
            context['discord_context'] = {
                'guild': str(snapshot.guild_id) if snapshot.guild_id else 'DM',
                'channel': snapshot.channel_name,
                'author': snapshot.author.name,
                'author_id': snapshot.author.id,
                'content': snapshot.content[:100] if snapshot.content else None,
            }

        return context


class ErrorHandler:
    """Error handling with context and recovery hints"""

    ERROR_CATEGORIES = {
        'discord': (
            discord.Forbidden,
            discord.NotFound,
            discord.HTTPException,
        ),
        'api': (
            ConnectionError,
            TimeoutError,
            OSError,
        ),
    }

    RECOVERY_SUGGESTIONS = (
        (discord.Forbidden, "Check the bot's Send Messages / Embed Links permissions in that channel"),
        (discord.NotFound, "Channel or message is gone - nothing to do"),
        (discord.HTTPException, "Discord API issue - the next event will try again"),
        (ConnectionError, "Network connection issue - check internet connection"),
        (TimeoutError, "Request timed out"),
        (OSError, "System resource issue - check disk space and permissions"),
    )

    @classmethod
    def categorize_error(cls, e: Exception) -> str:
        for category, error_types in cls.ERROR_CATEGORIES.items():
            if isinstance(e, error_types):
                return category
        return 'general'

    @classmethod
    def get_recovery_suggestion(cls, e: Exception) -> str:
        for error_type, suggestion in cls.RECOVERY_SUGGESTIONS:
            if isinstance(e, error_type):
                return suggestion
        return "Unexpected error - check logs for details"

    @classmethod
    def handle(cls, e: Exception, location: str, critical: bool = False, **context) -> None:
        """
        Handle an error with full context.

        Args:
            e: The exception
            location: Where the error occurred
            critical: Whether this error should stop execution
            **context: Additional context
        """
        category = cls.categorize_error(e)
        suggestion = cls.get_recovery_suggestion(e)
        full_context = ErrorContext.get_full_context(e, location, **context)

        error_msg = f"[{category.upper()}] in {location}"

        if not critical:
            logger.warning(f"⚠️ ERROR {error_msg}: {full_context['error_type']} - {str(e)[:100]} | Recovery: {suggestion}")
            return

        details = [
            ("Location", location),
            ("Type", full_context['error_type']),
            ("Error", full_context['error_message'][:200]),
            ("Recovery", suggestion),
        ]
        if 'discord_context' in full_context:
            dc = full_context['discord_context']
            details.append(("Discord Context", f"Guild={dc['guild']}, Channel={dc['channel']}, User={dc['author']}"))

        logger.error(f"💥 CRITICAL ERROR {error_msg}", details)
        logger.info(f"Traceback:\n{full_context['traceback']}")

        cls._store_critical_error(full_context)

    @staticmethod
    def _store_critical_error(context: Dict[str, Any]) -> None:
        """Store critical error context as JSON for later analysis."""
        try:
            ERROR_DIR.mkdir(exist_ok=True, parents=True)

            timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
            error_file = ERROR_DIR / f"error_{timestamp}.json"

            with open(error_file, 'w') as f:
                json.dump(context, f, indent=2, default=str)

            logger.info(f"Critical error saved to {error_file}")
        except OSError as save_error:
            logger.info(f"Failed to save error details: {save_error}")


__all__ = [
    "ErrorContext",
    "ErrorHandler",
]
