"""
Ghost Ping Bot - Services Package
=================================

Services hold the bot's decision logic, independent of how events arrive.

Available Services:
    ghost_ping: Ghost ping eligibility and notification
"""
