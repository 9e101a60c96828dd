"""
Ghost Ping Bot - Eligibility
============================

Decides whether a deleted message counts as a ghost ping.

Only direct user mentions are considered. Role, channel and @everyone
mentions never make a message eligible on their own.
"""

from typing import FrozenSet

from .models import DeletedMessageSnapshot


def others_mentioned(snapshot: DeletedMessageSnapshot) -> FrozenSet[int]:
    """User IDs mentioned in the snapshot, excluding the author."""
    mentioned = snapshot.mentioned_ids or frozenset()
    return frozenset(mentioned - {snapshot.author.id})


def is_ghost_ping(snapshot: DeletedMessageSnapshot) -> bool:
    """
    Check whether a deleted message is a ghost ping.

    A ghost ping is a message from a non-bot author that mentioned at
    least one user other than the author. Self-mentions alone never
    qualify.

    Args:
        snapshot: The deleted message snapshot.

    Returns:
        True if a notification should be sent.
    """
    if snapshot.author.bot:
        return False

    return bool(others_mentioned(snapshot))


__all__ = [
    "is_ghost_ping",
    "others_mentioned",
]
