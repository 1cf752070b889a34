"""
Replaying a game log over a player store.
"""

import datetime
from dataclasses import dataclass
from typing import Iterable

from .elo_rating import update_ratings
from .player_store import PlayerStore
from ..exceptions import InvalidGameError


@dataclass(frozen=True)
class Game:
    """
    A single game between two players.

    ``result`` is player1's score: 1.0 for a win, 0.5 for a draw and 0.0 for
    a loss.
    """

    date: datetime.date
    player1_id: str
    player2_id: str
    result: float


def play_game(store: PlayerStore, game: Game) -> PlayerStore:
    """
    Apply one game to a store.

    Args:
        store: Store holding both players
        game: The game to apply

    Returns:
        A new store with both players updated, player2 at the front and
        player1 right behind

    Raises:
        InvalidGameError: If both sides are the same player
        UnknownPlayerError: If either player is not in the store
    """
    if game.player1_id == game.player2_id:
        raise InvalidGameError(game.player1_id)

    player1 = store.lookup(game.player1_id)
    player2 = store.lookup(game.player2_id)

    rating1, rating2 = update_ratings(player1.rating, player2.rating, game.result)

    return (
        store
        .upsert(player1.id, player1.after_game(rating1))
        .upsert(player2.id, player2.after_game(rating2))
    )


def replay_games(store: PlayerStore, games: Iterable[Game]) -> PlayerStore:
    """
    Apply games to a store strictly in the order given.

    Elo updates depend on the order of games, so they are never reordered.
    The input store is left untouched; if any game fails, the error
    propagates and no partial result is returned.

    Args:
        store: Initial store
        games: Games in chronological order

    Returns:
        The store after every game has been played
    """
    for game in games:
        store = play_game(store, game)
    return store
