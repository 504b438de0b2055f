"""Skirmish: a two-combatant turn-based encounter with snapshot/restore.

Usage:
    from skirmish import EntityBuilder, EntityKind, LoggingWrapper, Session
    from skirmish.config import configure_logging

    configure_logging()  # strike lines go to stdout only once this is called

    goblin = LoggingWrapper(EntityBuilder().with_health(100).with_damage(40).build())
    sentinel = LoggingWrapper(EntityBuilder().with_health(200).with_damage(10).build())
    session = Session(goblin, sentinel)
    session.start_battle()
    goblin.strike()
"""

__version__ = "0.1.0"

from skirmish.core.entity import (
    Combatant,
    Entity,
    EntityBuilder,
    EntityKind,
    LoggingWrapper,
    MissingOpponentError,
)
from skirmish.session import GameState, MissingEntityError, Session
from skirmish.tracing import InMemoryHistory, SnapshotHistory

__all__ = [
    "__version__",
    "Combatant",
    "Entity",
    "EntityBuilder",
    "EntityKind",
    "LoggingWrapper",
    "MissingOpponentError",
    "Session",
    "GameState",
    "MissingEntityError",
    "SnapshotHistory",
    "InMemoryHistory",
]
