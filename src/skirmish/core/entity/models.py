"""Entity models: the combatant capability protocol and the plain entity record.

Usage:
    goblin = Entity(health=100, damage=40, kind=EntityKind.GOBLIN)
    sentinel = Entity(health=200, damage=10, kind=EntityKind.SENTINEL)
    goblin.opponent = sentinel
    goblin.strike()  # sentinel.health == 160
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable


class EntityKind(Enum):
    """Descriptive entity tag. Carries no behavior, only shows up in logs."""

    WARRIOR = "Warrior"
    GOBLIN = "Goblin"
    SENTINEL = "Sentinel"

    def __str__(self) -> str:
        return self.value


@runtime_checkable
class Combatant(Protocol):
    """Capability set shared by entities and anything that wraps them.

    Implementations expose mutable health/damage/kind/opponent and a strike
    action. Wrappers satisfy this structurally, without inheriting from Entity.
    """

    health: int
    damage: int
    kind: EntityKind | None
    opponent: Combatant | None

    def strike(self) -> None:
        """Reduce the opponent's health by this combatant's damage."""
        ...


@dataclass(slots=True, eq=False)
class Entity:
    """Mutable combat participant.

    Setters are unvalidated: only EntityBuilder clamps negative input.
    Equality is identity, two entities with equal stats are still distinct.
    """

    health: int = 0
    damage: int = 0
    kind: EntityKind | None = None
    opponent: Combatant | None = field(default=None, repr=False)

    def strike(self) -> None:
        """Hit the opponent for `damage`. No-op without an opponent.

        Health has no floor here and may go negative.
        """
        if self.opponent is not None:
            self.opponent.health -= self.damage
