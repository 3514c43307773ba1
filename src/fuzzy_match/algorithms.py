"""Raw string similarity algorithms.

These can be used directly when raw weights between two strings are
needed, but most callers should prefer ``fuzzy_match`` in the package root.
"""

import logging
from collections import deque

from .consts import BIGRAM_SIZE, LEVENSHTEIN, SORENSEN_DICE, SPACE
from .exceptions import UnknownAlgorithmError
from .protocols import SimilarityAlgorithm
from .utils import round_score_decimal

logger = logging.getLogger("fuzzy-match.algorithms")


class SorensenDice:
    """Sorensen-Dice coefficient over character bigrams.

    Rewards shared local character order without being as sensitive to a
    single transposition as edit distance, which makes it a good coarse
    first filter.
    """

    def __init__(self):
        # Sliding window reused by every bigram extraction on this instance
        self._window: deque[str] = deque(maxlen=BIGRAM_SIZE)

    def bigrams(self, text: str) -> set[tuple[str, str]]:
        """Get the set of adjacent character pairs in a string.

        Pairs containing a space are dropped, so words are compared on their
        own content rather than on where they sit in the string.

        Args:
            text: String to split.

        Returns:
            Set of (first, second) character pairs.
        """
        if len(text) < BIGRAM_SIZE:
            return set()

        window = self._window
        window.clear()
        pairs = set()
        for char in text:
            window.append(char)
            if len(window) < BIGRAM_SIZE:
                continue
            first, second = window
            if first != SPACE and second != SPACE:
                pairs.add((first, second))
        return pairs

    def similarity(self, a: str, b: str) -> float:
        if a == b:
            return 1.0
        if len(a) == 1 and len(b) == 1:
            return 0.0
        if not a or not b:
            return 0.0

        a_pairs = self.bigrams(a)
        b_pairs = self.bigrams(b)

        total = len(a_pairs) + len(b_pairs)
        if total == 0:
            # e.g. "a b" vs "c d": nothing left once spaces are dropped
            return 0.0
        shared = len(a_pairs & b_pairs)

        return round_score_decimal(2 * shared / total)


class Levenshtein:
    """Levenshtein edit distance, normalized by the longer string.

    Finer grained than bigram overlap but O(n*m) in time and space, so it is
    best kept to the handful of candidates left over after a cheaper pass.
    """

    @staticmethod
    def distance(s: str, t: str) -> int:
        """Minimum number of single-character edits turning ``s`` into ``t``.

        Insertions, deletions and substitutions each cost 1.
        """
        n = len(s)
        m = len(t)

        # rows[i][j] is the distance between s[:i] and t[:j]
        rows = [[0] * (m + 1) for _ in range(n + 1)]
        for i in range(n + 1):
            rows[i][0] = i
        for j in range(m + 1):
            rows[0][j] = j

        for i in range(1, n + 1):
            for j in range(1, m + 1):
                cost = 0 if s[i - 1] == t[j - 1] else 1

                above = rows[i - 1][j] + 1
                left = rows[i][j - 1] + 1
                diag = rows[i - 1][j - 1] + cost

                rows[i][j] = min(above, left, diag)

        return rows[n][m]

    def similarity(self, a: str, b: str) -> float:
        n = len(a)
        m = len(b)

        if a == b:
            return 1.0
        if n == 1 and m == 1:
            return 0.0
        if n == 0 or m == 0:
            return 0.0

        # Normalizing by the longer string means one edit counts for less
        # the longer the strings are
        return round_score_decimal(1 - self.distance(a, b) / max(n, m))


ALGORITHMS: dict[str, type[SimilarityAlgorithm]] = {
    SORENSEN_DICE: SorensenDice,
    LEVENSHTEIN: Levenshtein,
}


def get_algorithm(name: str) -> type[SimilarityAlgorithm]:
    """Look up a registered algorithm class by name.

    Args:
        name: Registry name, e.g. "sorensen_dice". Case-insensitive.

    Returns:
        The algorithm class, ready to be instantiated with no arguments.

    Raises:
        UnknownAlgorithmError: If no algorithm is registered under the name.
    """
    key = name.strip().lower()
    try:
        return ALGORITHMS[key]
    except KeyError:
        scorer = SorensenDice()
        available = sorted(
            ALGORITHMS,
            key=lambda candidate: scorer.similarity(key, candidate),
            reverse=True,
        )
        logger.debug(f"Unknown algorithm '{name}', available: {available}")
        raise UnknownAlgorithmError(
            f"Unknown similarity algorithm '{name}'",
            errors=[f"'{key}' is not a registered algorithm name"],
            suggestions=[f"Use one of: {', '.join(available)}"],
            context={"requested": name, "available": available},
        ) from None
