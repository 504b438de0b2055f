"""Snapshot history for rewinding sessions.

Usage:
    from skirmish.tracing import InMemoryHistory

    history = InMemoryHistory()
    history.record(session.save())
    session.restore(history.last_snapshot())
"""

from skirmish.tracing.memory import InMemoryHistory
from skirmish.tracing.protocol import SnapshotHistory

__all__ = [
    "InMemoryHistory",
    "SnapshotHistory",
]
