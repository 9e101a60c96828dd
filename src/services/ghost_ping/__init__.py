"""
Ghost Ping Bot - Ghost Ping Service
===================================

Detection and notification of deleted messages that pinged someone.

Structure:
    - models.py: DeletedMessageSnapshot, SnapshotAuthor, ReplyReference
    - eligibility.py: is_ghost_ping() decision
    - notifier.py: GhostPingNotifier with reply-context enrichment
"""

from .eligibility import is_ghost_ping, others_mentioned
from .models import DeletedMessageSnapshot, ReplyReference, SnapshotAuthor
from .notifier import (
    FetchFailure,
    GhostPingError,
    GhostPingNotifier,
    ReplyContext,
    ResolutionFailure,
)

__all__ = [
    "DeletedMessageSnapshot",
    "ReplyReference",
    "SnapshotAuthor",
    "is_ghost_ping",
    "others_mentioned",
    "GhostPingNotifier",
    "GhostPingError",
    "ResolutionFailure",
    "FetchFailure",
    "ReplyContext",
]
