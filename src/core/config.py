"""
Ghost Ping Bot - Configuration Module
======================================

Centralized configuration management with environment variable validation.

DESIGN:
    This module provides a single source of truth for all configuration,
    loaded from environment variables at startup. Using a dataclass ensures
    type safety and one validation pass at load time.

    Key patterns:
    - Singleton pattern via get_config() ensures one Config instance
    - Validation happens once at load time, not on every access
    - Optional values fall back to defaults with a logged warning
"""

import os
from dataclasses import dataclass, field
from typing import Optional, Set
from zoneinfo import ZoneInfo


# =============================================================================
# Timezone Configuration
# =============================================================================

NY_TZ = ZoneInfo("America/New_York")
"""Eastern timezone for consistent timestamps across all bot operations."""


# =============================================================================
# Configuration Dataclass
# =============================================================================

@dataclass
class Config:
    """
    Bot configuration loaded from environment variables.

    Attributes:
        discord_token: Discord bot authentication token.
        ignored_channel_ids: Channels where deleted messages are never checked.
        content_max_length: Max characters of deleted content quoted back.
        error_webhook_url: Discord webhook URL for error alerts.
    """

    # -------------------------------------------------------------------------
    # Required: Discord
    # -------------------------------------------------------------------------

    discord_token: str

    # -------------------------------------------------------------------------
    # Optional: Ghost Ping Detection
    # -------------------------------------------------------------------------

    ignored_channel_ids: Set[int] = field(default_factory=set)
    content_max_length: int = 1000

    # -------------------------------------------------------------------------
    # Optional: Webhooks
    # -------------------------------------------------------------------------

    error_webhook_url: Optional[str] = None


# =============================================================================
# Embed Colors
# =============================================================================

class EmbedColors:
    """Standardized color palette for Discord embeds."""

    GOLD = 0xE6B84A     # #E6B84A - Warnings/info/neutral

    GHOST_PING = GOLD


# =============================================================================
# Validation
# =============================================================================

class ConfigValidationError(Exception):
    """Raised when required configuration is missing or invalid."""

    pass


def _parse_int_set(value: Optional[str]) -> Set[int]:
    """
    Parse comma-separated string to set of integers.

    Args:
        value: Comma-separated string of integers (e.g., "123,456,789").

    Returns:
        Set of parsed integers, empty set if input is None or empty.
    """
    if not value:
        return set()
    result = set()
    for part in value.split(","):
        part = part.strip()
        if part:
            try:
                result.add(int(part))
            except ValueError:
                pass  # Skip invalid entries silently
    return result


def _parse_int_with_default(value: Optional[str], default: int, name: str, min_val: int = None, max_val: int = None) -> int:
    """
    Parse optional integer with default and range validation.

    Args:
        value: String value from environment variable.
        default: Default value if not set or invalid.
        name: Variable name for warning messages.
        min_val: Minimum allowed value (inclusive).
        max_val: Maximum allowed value (inclusive).

    Returns:
        Parsed integer within valid range, or default.
    """
    if not value:
        return default
    try:
        parsed = int(value)
        if min_val is not None and parsed < min_val:
            from src.core.logger import logger
            logger.warning(f"Config {name}={parsed} below min {min_val}, using {min_val}")
            return min_val
        if max_val is not None and parsed > max_val:
            from src.core.logger import logger
            logger.warning(f"Config {name}={parsed} above max {max_val}, using {max_val}")
            return max_val
        return parsed
    except ValueError:
        from src.core.logger import logger
        logger.warning(f"Config {name}='{value}' invalid, using default {default}")
        return default


def _validate_url(value: Optional[str], name: str) -> Optional[str]:
    """
    Validate URL format for webhooks.

    Returns:
        URL if valid, None if invalid or empty.
    """
    if not value:
        return None
    if not value.startswith(("https://", "http://")):
        from src.core.logger import logger
        logger.warning(f"Config {name} invalid URL format, ignoring")
        return None
    return value


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config() -> Config:
    """
    Load and validate configuration from environment variables.

    Returns:
        Validated Config object with all settings.

    Raises:
        ConfigValidationError: If any required variable is missing.
    """
    discord_token = os.getenv("DISCORD_TOKEN")
    if not discord_token:
        raise ConfigValidationError("Missing required environment variables: DISCORD_TOKEN")

    return Config(
        discord_token=discord_token,
        ignored_channel_ids=_parse_int_set(os.getenv("IGNORED_CHANNEL_IDS")),
        content_max_length=_parse_int_with_default(
            os.getenv("GHOST_PING_CONTENT_MAX_LENGTH"), 1000, "GHOST_PING_CONTENT_MAX_LENGTH",
            min_val=50, max_val=1500,
        ),
        error_webhook_url=_validate_url(os.getenv("ERROR_WEBHOOK_URL"), "ERROR_WEBHOOK_URL"),
    )


# =============================================================================
# Global Config Instance
# =============================================================================

_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance, loading if needed.

    Raises:
        ConfigValidationError: On first call if config is invalid.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Drop the cached Config so the next get_config() reloads from env."""
    global _config
    _config = None


# =============================================================================
# Config Validation & Logging
# =============================================================================

def validate_and_log_config() -> None:
    """
    Validate configuration and log results at startup.

    Raises:
        ConfigValidationError: If required configuration is missing.
    """
    from src.core.logger import logger

    config = get_config()

    logger.tree("Configuration Validated", [
        ("Required", "✅ All required variables set"),
        ("Ignored Channels", str(len(config.ignored_channel_ids))),
        ("Content Max Length", str(config.content_max_length)),
        ("Error Webhook", "Enabled" if config.error_webhook_url else "Disabled"),
    ], emoji="⚙️")


# =============================================================================
# Module Export
# =============================================================================

__all__ = [
    "Config",
    "ConfigValidationError",
    "EmbedColors",
    "NY_TZ",
    "get_config",
    "load_config",
    "reset_config",
    "validate_and_log_config",
]
