"""Session: pairs two combatants and saves/restores their state.

Usage:
    session = Session()
    session.set_entity1(LoggingWrapper(goblin))
    session.set_entity2(LoggingWrapper(sentinel))
    session.start_battle()

    state = session.save()
    ...
    session.restore(state)
"""

from __future__ import annotations

import logging

from skirmish.core.entity import Combatant
from skirmish.session.models import GameState

logger = logging.getLogger(__name__)


class MissingEntityError(Exception):
    """Raised when a session operation needs both entities but one is unset."""

    pass


class Session:
    """Owns exactly two combatants and links them as mutual opponents.

    Combatants are held by reference. Strikes made through any other handle
    (bare entity or wrapper) are visible to save() immediately.
    """

    def __init__(
        self,
        entity1: Combatant | None = None,
        entity2: Combatant | None = None,
    ) -> None:
        self._entity1 = entity1
        self._entity2 = entity2

    @property
    def entity1(self) -> Combatant | None:
        return self._entity1

    @property
    def entity2(self) -> Combatant | None:
        return self._entity2

    def set_entity1(self, entity: Combatant) -> None:
        self._entity1 = entity

    def set_entity2(self, entity: Combatant) -> None:
        self._entity2 = entity

    def _require_entities(self, operation: str) -> tuple[Combatant, Combatant]:
        first, second = self._entity1, self._entity2
        if first is None or second is None:
            missing = [
                name for name, entity in (("entity1", first), ("entity2", second)) if entity is None
            ]
            raise MissingEntityError(f"Cannot {operation}: {', '.join(missing)} not set")
        return first, second

    def start_battle(self) -> None:
        """Link both combatants as each other's opponent.

        Safe to call repeatedly with the same pair.

        Raises:
            MissingEntityError: If either combatant is unset.
        """
        first, second = self._require_entities("start battle")
        first.opponent = second
        second.opponent = first
        logger.debug("Battle started: %s vs %s", first.kind, second.kind)

    def save(self) -> GameState:
        """Capture both combatants' health, damage and kind.

        Raises:
            MissingEntityError: If either combatant is unset.
        """
        first, second = self._require_entities("save state")
        state = GameState(
            entity1_health=first.health,
            entity1_damage=first.damage,
            entity1_kind=first.kind,
            entity2_health=second.health,
            entity2_damage=second.damage,
            entity2_kind=second.kind,
        )
        logger.debug("Saved state: %s", state)
        return state

    def restore(self, state: GameState | None) -> None:
        """Overwrite both combatants' fields from a snapshot.

        A None snapshot (e.g. from an empty history) is ignored. Opponent
        links are left untouched.

        Raises:
            MissingEntityError: If a snapshot is given and either combatant is unset.
        """
        if state is None:
            logger.debug("Restore skipped: no snapshot")
            return
        first, second = self._require_entities("restore state")
        first.health = state.entity1_health
        first.damage = state.entity1_damage
        first.kind = state.entity1_kind
        second.health = state.entity2_health
        second.damage = state.entity2_damage
        second.kind = state.entity2_kind
        logger.debug("Restored state: %s", state)

    def __repr__(self) -> str:
        return f"Session(entity1={self._entity1!r}, entity2={self._entity2!r})"
