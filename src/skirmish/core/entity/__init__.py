"""Entity functionality: models, builder, and logging wrapper."""

from skirmish.core.entity.builder import EntityBuilder
from skirmish.core.entity.models import Combatant, Entity, EntityKind
from skirmish.core.entity.wrapper import LoggingWrapper, MissingOpponentError

__all__ = [
    # Models
    "Combatant",
    "Entity",
    "EntityKind",
    # Construction
    "EntityBuilder",
    # Wrapping
    "LoggingWrapper",
    "MissingOpponentError",
]
