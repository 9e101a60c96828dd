"""
Ghost Ping Bot - Events Package
===============================

Event handler Cogs loaded by the bot with load_extension().

DESIGN:
    Each event module contains a Cog class with @commands.Cog.listener
    decorators and a module-level setup() coroutine.

    Event routing:
    - ghost_ping.py: Message delete -> ghost ping notification
"""

EVENT_COGS = [
    "src.events.ghost_ping",
]
"""Event cog module paths; the bot calls load_extension() for each."""


__all__ = [
    "EVENT_COGS",
]
