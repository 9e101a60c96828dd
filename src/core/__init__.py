"""
Ghost Ping Bot - Core Package
=============================

Configuration and logging shared by the rest of the bot.

DESIGN:
    Core modules expose global instances so every module sees the same state:
    - get_config() returns the same Config instance
    - logger is a global TreeLogger instance
"""

from .config import (
    Config,
    ConfigValidationError,
    EmbedColors,
    NY_TZ,
    get_config,
)

from .logger import logger, TreeLogger


__all__ = [
    # Config
    "Config",
    "ConfigValidationError",
    "EmbedColors",
    "NY_TZ",
    "get_config",
    # Logger
    "logger",
    "TreeLogger",
]
