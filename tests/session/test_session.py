"""Tests for Session linking, save and restore."""

import pytest

from skirmish import Entity, EntityKind, GameState, LoggingWrapper, MissingEntityError, Session


def test_start_battle_links_opponents_symmetrically(goblin, sentinel):
    session = Session()
    session.set_entity1(goblin)
    session.set_entity2(sentinel)

    session.start_battle()

    assert goblin.opponent is sentinel
    assert sentinel.opponent is goblin


def test_start_battle_links_wrappers(battle):
    session, player, opponent = battle

    assert player.opponent is opponent
    assert opponent.opponent is player
    assert session.entity1 is player
    assert session.entity2 is opponent


def test_start_battle_is_idempotent(goblin, sentinel):
    session = Session(goblin, sentinel)

    session.start_battle()
    session.start_battle()

    assert goblin.opponent is sentinel
    assert sentinel.opponent is goblin


def test_set_entity_overwrites(goblin, sentinel):
    replacement = Entity(health=1, damage=1, kind=EntityKind.WARRIOR)
    session = Session(goblin, sentinel)

    session.set_entity1(replacement)
    session.start_battle()

    assert session.entity1 is replacement
    assert replacement.opponent is sentinel
    assert sentinel.opponent is replacement


@pytest.mark.parametrize(
    ("use_first", "use_second", "missing"),
    [
        (False, False, "entity1, entity2"),
        (True, False, "entity2"),
        (False, True, "entity1"),
    ],
)
def test_start_battle_requires_both_entities(goblin, sentinel, use_first, use_second, missing):
    session = Session(goblin if use_first else None, sentinel if use_second else None)

    with pytest.raises(MissingEntityError, match=missing):
        session.start_battle()

    assert goblin.opponent is None
    assert sentinel.opponent is None


def test_save_requires_both_entities(goblin):
    with pytest.raises(MissingEntityError):
        Session(goblin).save()


def test_save_copies_current_values(battle):
    session, player, _ = battle
    player.strike()

    state = session.save()

    assert state == GameState(
        entity1_health=100,
        entity1_damage=40,
        entity1_kind=EntityKind.GOBLIN,
        entity2_health=160,
        entity2_damage=10,
        entity2_kind=EntityKind.SENTINEL,
    )


def test_consecutive_saves_are_equal(battle):
    session, _, _ = battle

    assert session.save() == session.save()


def test_save_sees_strikes_through_bare_entity(goblin, sentinel):
    """Aliasing: a strike through the unwrapped entity shows up in save()."""
    session = Session(LoggingWrapper(goblin), LoggingWrapper(sentinel))
    session.start_battle()

    goblin.strike()

    assert session.save().entity2_health == 160


def test_snapshot_is_not_affected_by_later_strikes(battle):
    session, player, _ = battle
    state = session.save()

    player.strike()

    assert state.entity2_health == 200


def test_restore_round_trip(battle, goblin, sentinel):
    session, player, _ = battle
    state = session.save()

    player.strike()
    assert sentinel.health == 160

    session.restore(state)

    assert sentinel.health == 200
    assert goblin.health == 100


def test_restore_resets_damage_and_kind(battle, goblin, sentinel):
    session, _, _ = battle
    state = session.save()

    goblin.damage = 999
    goblin.kind = EntityKind.WARRIOR
    sentinel.damage = 0
    sentinel.kind = None

    session.restore(state)

    assert goblin.damage == 40
    assert goblin.kind is EntityKind.GOBLIN
    assert sentinel.damage == 10
    assert sentinel.kind is EntityKind.SENTINEL


def test_restore_keeps_opponent_links(battle):
    session, player, opponent = battle
    state = session.save()

    session.restore(state)

    assert player.opponent is opponent
    assert opponent.opponent is player


def test_restore_none_is_noop(battle, goblin):
    session, player, _ = battle
    player.damage = 1

    session.restore(None)

    assert goblin.damage == 1


def test_restore_none_without_entities_is_noop():
    Session().restore(None)


def test_restore_requires_both_entities(battle, goblin):
    session, _, _ = battle
    state = session.save()

    with pytest.raises(MissingEntityError):
        Session(goblin).restore(state)


def test_repr_lists_both_entities(battle):
    session, _, _ = battle

    text = repr(session)

    assert text.startswith("Session(")
    assert "health=100" in text
    assert "health=200" in text
