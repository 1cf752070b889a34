"""
Core implementation of the Elo rating formula.
"""

import math
from typing import Tuple

from ..constants import K_FACTOR, RATING_SCALE


def rating_factor(rating: float) -> float:
    """
    Calculate the strength factor of a rating.

    Args:
        rating: Elo rating of a player

    Returns:
        10 raised to the power of rating / 400
    """
    return 10.0 ** (rating / RATING_SCALE)


def expected_score(rating_a: float, rating_b: float) -> float:
    """
    Calculate the expected score for player A against player B.

    Args:
        rating_a: Elo rating of player A
        rating_b: Elo rating of player B

    Returns:
        Expected score for player A (between 0 and 1)
    """
    try:
        factor_a = rating_factor(rating_a)
        factor_b = rating_factor(rating_b)
        total = factor_a + factor_b
        if 0.0 < total < math.inf:
            return factor_a / total
    except OverflowError:
        pass

    # Factors out of float range; only the rating difference matters
    try:
        return 1.0 / (1.0 + rating_factor(rating_b - rating_a))
    except OverflowError:
        return 0.0


def rating_delta(rating_a: float, rating_b: float, result: float, k_factor: float = K_FACTOR) -> float:
    """
    Calculate how many points player A gains (and player B loses) from one game.

    Args:
        rating_a: Elo rating of player A
        rating_b: Elo rating of player B
        result: Score of player A (1 for win, 0.5 for draw, 0 for loss)
        k_factor: K-factor for Elo calculation

    Returns:
        The signed rating change for player A
    """
    return k_factor * (result - expected_score(rating_a, rating_b))


def update_ratings(
    rating_a: float, rating_b: float, result: float, k_factor: float = K_FACTOR
) -> Tuple[float, float]:
    """
    Update both ratings after a game between player A and player B.

    Args:
        rating_a: Elo rating of player A
        rating_b: Elo rating of player B
        result: Score of player A (1 for win, 0.5 for draw, 0 for loss)
        k_factor: K-factor for Elo calculation

    Returns:
        Tuple of (new rating for player A, new rating for player B)
    """
    delta = rating_delta(rating_a, rating_b, result, k_factor)
    return rating_a + delta, rating_b - delta
