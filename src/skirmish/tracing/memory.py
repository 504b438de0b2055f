"""In-memory snapshot history."""

from __future__ import annotations

import logging

from skirmish.session.models import GameState

logger = logging.getLogger(__name__)


class InMemoryHistory:
    """Append-only list of snapshots in chronological order."""

    def __init__(self) -> None:
        self._snapshots: list[GameState] = []

    def record(self, snapshot: GameState) -> None:
        self._snapshots.append(snapshot)
        logger.debug("Recorded snapshot #%d", len(self._snapshots))

    def last_snapshot(self) -> GameState | None:
        if not self._snapshots:
            return None
        return self._snapshots[-1]

    @property
    def snapshot_count(self) -> int:
        return len(self._snapshots)

    def __len__(self) -> int:
        return len(self._snapshots)
