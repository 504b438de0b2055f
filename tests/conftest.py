"""Shared test fixtures."""

import logging
import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from skirmish import EntityBuilder, EntityKind, LoggingWrapper, Session


@pytest.fixture
def goblin():
    """Goblin with 100 health and 40 damage."""
    return EntityBuilder().with_health(100).with_damage(40).with_kind(EntityKind.GOBLIN).build()


@pytest.fixture
def sentinel():
    """Sentinel with 200 health and 10 damage."""
    return EntityBuilder().with_health(200).with_damage(10).with_kind(EntityKind.SENTINEL).build()


@pytest.fixture
def battle(goblin, sentinel):
    """Started session over wrapped goblin and sentinel.

    Returns (session, wrapped_goblin, wrapped_sentinel).
    """
    player = LoggingWrapper(goblin)
    opponent = LoggingWrapper(sentinel)
    session = Session()
    session.set_entity1(player)
    session.set_entity2(opponent)
    session.start_battle()
    return session, player, opponent


@pytest.fixture
def package_logger():
    """The ``skirmish`` logger, with handlers, level and propagation restored afterwards."""
    logger = logging.getLogger("skirmish")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
