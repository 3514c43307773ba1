"""Two-phase best match selection over a set of candidate strings."""

import logging
from collections.abc import Iterable
from typing import TypeVar

from .algorithms import Levenshtein, SorensenDice
from .exceptions import EmptyHaystackError
from .protocols import SimilarityAlgorithm

logger = logging.getLogger("fuzzy-match.matcher")

T = TypeVar("T")


def _highest_scoring(
    algorithm: SimilarityAlgorithm,
    needle: str,
    candidates: list[tuple[str, T]],
) -> tuple[float, list[tuple[str, T]]]:
    """Scan candidates once, keeping every pair that shares the best score.

    A strictly higher score restarts the winner set and an equal score joins
    it, so winners stay in input order. The running maximum starts at 0.0.

    Returns:
        Tuple of (highest score, winning pairs).
    """
    highest_score = 0.0
    winners: list[tuple[str, T]] = []
    for name, payload in candidates:
        score = algorithm.similarity(needle, name)
        if score > highest_score:
            highest_score = score
            winners = [(name, payload)]
        elif score == highest_score:
            winners.append((name, payload))
    return highest_score, winners


def fuzzy_match_with_algorithms(
    needle: str,
    haystack: Iterable[tuple[str, T]],
    primary: type[SimilarityAlgorithm] = SorensenDice,
    secondary: type[SimilarityAlgorithm] = Levenshtein,
) -> T | None:
    """Find the payload whose name is most similar to the needle.

    The ``primary`` algorithm scores every candidate. If exactly one scores
    highest its payload is returned. If several tie, the ``secondary``
    algorithm rescores only those, and a single winner there is returned.
    A tie that survives both passes returns None rather than an arbitrary
    pick, as does a haystack where nothing is similar at all.

    Args:
        needle: String to look up.
        haystack: (name, payload) pairs. Consumed once; payloads are opaque.
        primary: Algorithm class used for the first pass.
        secondary: Algorithm class used to break ties.

    Returns:
        The payload of the single best match, or None.

    Raises:
        EmptyHaystackError: If the haystack has no candidates.
    """
    candidates = list(haystack)
    if not candidates:
        raise EmptyHaystackError(
            "No haystack provided!",
            errors=["haystack yielded no (name, payload) pairs"],
            suggestions=["Check the code that builds the candidate list"],
            context={"needle": needle},
        )

    logger.debug(
        f"Matching '{needle}' against {len(candidates)} candidates "
        f"with {primary.__name__}/{secondary.__name__}"
    )

    highest_score, winners = _highest_scoring(primary(), needle, candidates)
    logger.debug(f"{primary.__name__}: best {highest_score} shared by {len(winners)}")

    if not winners or highest_score == 0.0:
        return None
    if len(winners) == 1:
        return winners[0][1]

    highest_score, winners = _highest_scoring(secondary(), needle, winners)
    logger.debug(f"{secondary.__name__}: best {highest_score} shared by {len(winners)}")

    if len(winners) != 1:
        logger.debug(f"Unresolved tie for '{needle}' between {len(winners)} candidates")
        return None
    return winners[0][1]


def fuzzy_match(needle: str, haystack: Iterable[tuple[str, T]]) -> T | None:
    """Fuzzy find a name-payload pair, breaking Sorensen-Dice ties with Levenshtein.

    Use ``fuzzy_match_with_algorithms`` for a different pair, e.g. one looked
    up by name with ``get_algorithm``.

    >>> fuzzy_match("bust", [("rust", 0), ("java", 1), ("lisp", 2)])
    0
    """
    return fuzzy_match_with_algorithms(needle, haystack)
