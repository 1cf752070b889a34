"""
Elo Ladder - compute a ranked Elo ladder from a roster and a game log.
"""

__version__ = "0.1.0"

from .core import (
    Game,
    Player,
    PlayerStore,
    RankedPlayer,
    expected_score,
    play_game,
    rank_players,
    rating_delta,
    rating_factor,
    replay_games,
    update_ratings,
)
from .exceptions import (
    DuplicatePlayerError,
    InvalidGameError,
    LadderError,
    MalformedRecordError,
    UnknownPlayerError,
)

__all__ = [
    "Game",
    "Player",
    "PlayerStore",
    "RankedPlayer",
    "expected_score",
    "play_game",
    "rank_players",
    "rating_delta",
    "rating_factor",
    "replay_games",
    "update_ratings",
    "DuplicatePlayerError",
    "InvalidGameError",
    "LadderError",
    "MalformedRecordError",
    "UnknownPlayerError",
]
