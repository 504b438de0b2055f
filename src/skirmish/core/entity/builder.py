"""Fluent builder producing configured entities.

Usage:
    goblin = EntityBuilder().with_health(100).with_damage(40).with_kind(EntityKind.GOBLIN).build()
"""

from __future__ import annotations

from typing import Self

from skirmish.core.entity.models import Entity, EntityKind


class EntityBuilder:
    """Accumulates entity fields, clamping negative health and damage to zero.

    Fields never set fall back to a zero state: health 0, damage 0 and no kind.
    Building never fails, and every build() returns a fresh Entity.
    """

    __slots__ = ("_health", "_damage", "_kind")

    def __init__(self) -> None:
        self._health = 0
        self._damage = 0
        self._kind: EntityKind | None = None

    def with_health(self, health: int) -> Self:
        self._health = max(health, 0)
        return self

    def with_damage(self, damage: int) -> Self:
        self._damage = max(damage, 0)
        return self

    def with_kind(self, kind: EntityKind) -> Self:
        self._kind = kind
        return self

    def build(self) -> Entity:
        """Create a new entity from the pending fields."""
        return Entity(health=self._health, damage=self._damage, kind=self._kind)
