"""Protocols for snapshot history storage.

These protocols define the interface for history backends so sessions can be
rewound without depending on a concrete store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from skirmish.session.models import GameState


@runtime_checkable
class SnapshotHistory(Protocol):
    """Protocol for append-only snapshot storage.

    Only the most recent snapshot is retrievable; there is no indexed or
    range access.

    Usage:
        history = InMemoryHistory()
        history.record(session.save())
        ...
        session.restore(history.last_snapshot())
    """

    def record(self, snapshot: GameState) -> None:
        """Append a snapshot after all previously recorded ones.

        Args:
            snapshot: State to store.
        """
        ...

    def last_snapshot(self) -> GameState | None:
        """Get the most recently recorded snapshot.

        Returns:
            The latest GameState, or None if nothing has been recorded.
        """
        ...

    @property
    def snapshot_count(self) -> int:
        """Number of snapshots currently stored."""
        ...
