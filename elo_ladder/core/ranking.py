"""
Ranking players by rating.
"""

from dataclasses import dataclass
from typing import List

import numpy as np

from .player_store import Player, PlayerStore


@dataclass(frozen=True)
class RankedPlayer:
    rank: int
    player: Player


def rank_players(store: PlayerStore) -> List[RankedPlayer]:
    """
    Sort the players of a store by rating, highest first.

    The sort is stable: players with equal ratings keep the order they have
    in the store. Ranks start at 1 and follow position, so tied players still
    get distinct ranks.

    Args:
        store: The store to rank

    Returns:
        Ranked players, best first
    """
    players = store.players()
    if not players:
        return []

    ratings = np.array([player.rating for player in players], dtype=float)
    order = np.argsort(-ratings, kind="stable")

    return [
        RankedPlayer(rank=position + 1, player=players[index])
        for position, index in enumerate(order.tolist())
    ]
