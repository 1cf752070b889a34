"""
Tests for the ordered player store.
"""

import pytest

from elo_ladder import DuplicatePlayerError, Player, PlayerStore, UnknownPlayerError


def test_player_defaults_to_zero_games():
    player = Player("magnus", "Magnus Carlsen", 2870.0)
    assert player.game_count == 0


def test_player_is_immutable():
    player = Player("magnus", "Magnus Carlsen", 2870.0)
    with pytest.raises(AttributeError):
        player.rating = 2900.0


def test_after_game():
    player = Player("magnus", "Magnus Carlsen", 2870.0, 3)
    updated = player.after_game(2880.5)
    assert updated == Player("magnus", "Magnus Carlsen", 2880.5, 4)
    assert player.game_count == 3


def test_from_players_keeps_order(abc):
    assert abc.ids() == ("a", "b", "c")
    assert [p.id for p in abc] == ["a", "b", "c"]
    assert len(abc) == 3


def test_from_players_rejects_duplicates():
    with pytest.raises(DuplicatePlayerError) as excinfo:
        PlayerStore.from_players([
            Player("a", "First", 1000.0),
            Player("a", "Second", 1100.0),
        ])
    assert excinfo.value.player_id == "a"


def test_empty_store():
    store = PlayerStore()
    assert len(store) == 0
    assert store.players() == []
    assert "a" not in store


def test_lookup(abc):
    assert abc.lookup("b").name == "Player B"
    assert "b" in abc


def test_lookup_unknown(abc):
    with pytest.raises(UnknownPlayerError) as excinfo:
        abc.lookup("zed")
    assert excinfo.value.player_id == "zed"
    # Also usable as a KeyError
    with pytest.raises(KeyError):
        abc.lookup("zed")


def test_upsert_promotes_to_front(abc):
    updated = abc.upsert("c", Player("c", "Player C", 1010.0, 1))
    assert updated.ids() == ("c", "a", "b")
    assert updated.lookup("c").rating == 1010.0


def test_upsert_keeps_other_order(abc):
    updated = abc.upsert("b", abc.lookup("b")).upsert("a", abc.lookup("a"))
    assert updated.ids() == ("a", "b", "c")
    updated = updated.upsert("c", abc.lookup("c"))
    assert updated.ids() == ("c", "a", "b")


def test_upsert_new_id(abc):
    updated = abc.upsert("d", Player("d", "Player D", 900.0))
    assert updated.ids() == ("d", "a", "b", "c")
    assert len(updated) == 4


def test_upsert_does_not_modify_original(abc):
    abc.upsert("c", Player("c", "Player C", 1200.0, 1))
    assert abc.ids() == ("a", "b", "c")
    assert abc.lookup("c").rating == 1000.0


def test_names(abc):
    assert abc.names() == {"a": "Player A", "b": "Player B", "c": "Player C"}


def test_equality(abc):
    same = PlayerStore.from_players(abc.players())
    assert same == abc
    assert abc.upsert("b", abc.lookup("b")) != abc
