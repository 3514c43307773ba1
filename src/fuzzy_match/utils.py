"""Utility functions shared by the similarity algorithms."""

import math

from .consts import SCORE_SCALE


def round_score_decimal(value: float) -> float:
    """Round a similarity score to 5 decimal places.

    Halves round up rather than to even, so ``2/3`` becomes ``0.66667``.
    Scores are never negative, which lets floor-based rounding stand in
    for round-half-away-from-zero.

    Args:
        value: Raw score in the range [0.0, 1.0].

    Returns:
        The rounded score.
    """
    return math.floor(value * SCORE_SCALE + 0.5) / SCORE_SCALE
