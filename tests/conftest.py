"""
Shared fixtures for the ladder tests.
"""

import datetime

import pytest

from elo_ladder import Game, Player, PlayerStore


@pytest.fixture
def day():
    return datetime.date(2015, 3, 14)


@pytest.fixture
def alice_bob():
    """Two players on equal ratings."""
    return PlayerStore.from_players([
        Player("alice", "Alice Smith", 1500.0),
        Player("bob", "Bob Jones", 1500.0),
    ])


@pytest.fixture
def abc():
    """Three players on equal ratings, in order a, b, c."""
    return PlayerStore.from_players([
        Player("a", "Player A", 1000.0),
        Player("b", "Player B", 1000.0),
        Player("c", "Player C", 1000.0),
    ])


@pytest.fixture
def make_game(day):
    def _make(player1_id, player2_id, result, date=None):
        return Game(date or day, player1_id, player2_id, result)
    return _make
