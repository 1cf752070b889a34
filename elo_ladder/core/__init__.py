"""
Rating engine: the Elo formula, the player store and game replay.
"""

from .elo_rating import expected_score, rating_delta, rating_factor, update_ratings
from .player_store import Player, PlayerStore
from .ranking import RankedPlayer, rank_players
from .replay import Game, play_game, replay_games
