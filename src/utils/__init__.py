"""
Ghost Ping Bot - Utils Package
==============================

Helpers used across the bot.

Available Utilities:
    ErrorHandler: Categorized error logging with context
"""

from .error_handler import ErrorContext, ErrorHandler


__all__ = [
    "ErrorContext",
    "ErrorHandler",
]
