"""Fixed demo scenario: a goblin and a sentinel trade blows, then rewind.

Usage:
    python -m skirmish
    skirmish-demo
"""

from __future__ import annotations

from skirmish.config import SkirmishSettings, configure_logging
from skirmish.core.entity import EntityBuilder, EntityKind, LoggingWrapper
from skirmish.session import Session
from skirmish.tracing import InMemoryHistory


def run_scenario() -> Session:
    """Play the scripted encounter and return the restored session."""
    goblin = EntityBuilder().with_health(100).with_damage(40).with_kind(EntityKind.GOBLIN).build()
    sentinel = (
        EntityBuilder().with_health(200).with_damage(10).with_kind(EntityKind.SENTINEL).build()
    )

    player = LoggingWrapper(goblin)
    opponent = LoggingWrapper(sentinel)

    session = Session()
    session.set_entity1(player)
    session.set_entity2(opponent)
    session.start_battle()
    print(session)

    player.strike()
    opponent.strike()
    print(session)

    history = InMemoryHistory()
    history.record(session.save())

    player.strike()
    print(session)

    session.restore(history.last_snapshot())
    print("After restore:")
    print(session)
    return session


def main(settings: SkirmishSettings | None = None) -> int:
    """Entry point for the demo. Returns the process exit status."""
    configure_logging(settings)
    run_scenario()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
