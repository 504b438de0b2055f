from __future__ import annotations

import logging

from skirmish.core.entity.models import Combatant, EntityKind

logger = logging.getLogger(__name__)


class MissingOpponentError(Exception):
    """Raised when a logged strike is attempted before an opponent is linked."""

    pass


class LoggingWrapper:
    """Pass-through view over a combatant that logs every strike.

    Holds the wrapped combatant by reference and keeps no state of its own,
    so reads and writes through the wrapper hit the wrapped combatant directly.
    """

    __slots__ = ("_combatant", "_logger")

    def __init__(self, combatant: Combatant, log: logging.Logger | None = None) -> None:
        self._combatant = combatant
        self._logger = log or logger

    def unwrap(self) -> Combatant:
        """Return the wrapped combatant."""
        return self._combatant

    @property
    def health(self) -> int:
        return self._combatant.health

    @health.setter
    def health(self, value: int) -> None:
        self._combatant.health = value

    @property
    def damage(self) -> int:
        return self._combatant.damage

    @damage.setter
    def damage(self, value: int) -> None:
        self._combatant.damage = value

    @property
    def kind(self) -> EntityKind | None:
        return self._combatant.kind

    @kind.setter
    def kind(self, value: EntityKind | None) -> None:
        self._combatant.kind = value

    @property
    def opponent(self) -> Combatant | None:
        return self._combatant.opponent

    @opponent.setter
    def opponent(self, value: Combatant | None) -> None:
        self._combatant.opponent = value

    def strike(self) -> None:
        """Delegate the strike, then log attacker, defender and defender's health.

        Raises:
            MissingOpponentError: If the wrapped combatant has no opponent.
                Checked before delegating, so a failed call changes nothing.
        """
        opponent = self._combatant.opponent
        if opponent is None:
            raise MissingOpponentError(
                f"{self._combatant.kind} cannot strike: no opponent linked (call start_battle first)"
            )
        self._combatant.strike()
        self._logger.info(
            "%s hit %s, leaving them %d health", self._combatant.kind, opponent.kind, opponent.health
        )

    def __repr__(self) -> str:
        return repr(self._combatant)
