"""
Ghost Ping Bot - Source Package
===============================

Discord bot that flags ghost pings: messages that mention someone and are
deleted before the mention can be seen.

Package Structure:
- bot.py: Main Discord bot class
- core/: Configuration and logging
- events/: Event listener cogs (message delete)
- services/: Ghost ping detection and notification
- utils/: Error handling

Version: v1.0.0
"""
