"""
Tests for ranking a player store.
"""

from elo_ladder import Player, PlayerStore, rank_players, replay_games


def ranked_ids(store):
    return [entry.player.id for entry in rank_players(store)]


def test_empty_store():
    assert rank_players(PlayerStore()) == []


def test_sorted_by_rating_descending():
    store = PlayerStore.from_players([
        Player("low", "Low", 1200.0),
        Player("high", "High", 1800.0),
        Player("mid", "Mid", 1500.0),
    ])
    ranked = rank_players(store)
    assert [entry.player.id for entry in ranked] == ["high", "mid", "low"]
    assert [entry.rank for entry in ranked] == [1, 2, 3]


def test_ties_keep_store_order():
    store = PlayerStore.from_players([
        Player("a", "A", 1500.0),
        Player("b", "B", 1600.0),
        Player("c", "C", 1500.0),
        Player("d", "D", 1600.0),
    ])
    assert ranked_ids(store) == ["b", "d", "a", "c"]


def test_ranks_have_no_gaps_on_ties(abc):
    assert [entry.rank for entry in rank_players(abc)] == [1, 2, 3]


def test_end_to_end(alice_bob, make_game):
    final = replay_games(alice_bob, [make_game("alice", "bob", 1.0)])
    ranked = rank_players(final)
    assert [(e.rank, e.player.id, e.player.rating, e.player.game_count) for e in ranked] == [
        (1, "alice", 1516.0, 1),
        (2, "bob", 1484.0, 1),
    ]


def test_tie_break_follows_promotion(abc, make_game):
    final = replay_games(abc, [make_game("c", "a", 0.5)])
    assert final.lookup("a").rating == 1000.0
    assert final.lookup("c").rating == 1000.0
    # a was promoted last, then c; b was never touched
    assert ranked_ids(final) == ["a", "c", "b"]


def test_most_recent_game_wins_tie(abc, make_game):
    games = [make_game("a", "b", 0.5), make_game("c", "b", 0.5)]
    final = replay_games(abc, games)
    assert ranked_ids(final) == ["b", "c", "a"]


def test_ranking_does_not_modify_store(abc):
    rank_players(abc.upsert("c", Player("c", "Player C", 2000.0)))
    assert abc.ids() == ("a", "b", "c")
