#!/usr/bin/env python3
"""
Ghost Ping Bot Entry Point
==========================

A Discord bot that re-posts a notice when someone deletes a message that
pinged another user.

Features:
- Ghost ping detection on message delete
- Reply context (replied-to author and message link) in the notice
- Tree-style logging with optional error webhook
"""

import asyncio
import sys

from dotenv import load_dotenv

from src.core.logger import logger
from src.core.config import ConfigValidationError, get_config, validate_and_log_config
from src.utils.error_handler import ErrorHandler


async def main() -> None:
    """
    Main entry point for the bot.

    1. Loads environment configuration (.env supported)
    2. Validates required settings
    3. Starts the bot and runs until interrupted

    Raises:
        SystemExit: If configuration is invalid or the bot fails to start
    """
    load_dotenv()

    try:
        validate_and_log_config()
    except ConfigValidationError as e:
        logger.error("Invalid Configuration", [("Error", str(e))])
        sys.exit(1)

    from src.bot import GhostBot

    bot = GhostBot()
    try:
        async with bot:
            await bot.start(get_config().discord_token)
    except Exception as e:
        ErrorHandler.handle(e, location="main.main", critical=True)
        sys.exit(1)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("🛑 Bot stopped by user (Ctrl+C)")
