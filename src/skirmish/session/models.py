"""Session state snapshot.

Snapshots are point-in-time copies and hold no reference back to the entities,
so later strikes never change a snapshot that was already taken.
"""

from __future__ import annotations

from dataclasses import dataclass

from skirmish.core.entity import EntityKind


@dataclass(frozen=True, slots=True)
class GameState:
    """Immutable copy of both entities' health, damage and kind.

    Attributes:
        entity1_health: Health of the first entity when saved.
        entity1_damage: Damage of the first entity when saved.
        entity1_kind: Kind of the first entity when saved.
        entity2_health: Health of the second entity when saved.
        entity2_damage: Damage of the second entity when saved.
        entity2_kind: Kind of the second entity when saved.

    Example:
        state = session.save()
        history.record(state)
        ...
        session.restore(history.last_snapshot())
    """

    entity1_health: int
    entity1_damage: int
    entity1_kind: EntityKind | None
    entity2_health: int
    entity2_damage: int
    entity2_kind: EntityKind | None
