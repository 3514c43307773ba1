"""Protocol definitions for interface contracts."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SimilarityAlgorithm(Protocol):
    """Protocol for string similarity algorithms.

    Implementations are constructed with no arguments. Keep one instance
    around for as long as practical: any scratch storage it owns is then
    recycled between calls instead of being rebuilt. Instances are not
    safe to share between concurrent matches.
    """

    def similarity(self, a: str, b: str) -> float:
        """Get the similarity of two strings.

        Two identical strings always produce ``1.0`` and two mismatching
        length 1 strings produce ``0.0``. If either string is empty ``0.0``
        is returned. The bundled algorithms round to 5 decimal places, other
        implementations don't need to.

        Args:
            a: First string.
            b: Second string.

        Returns:
            Score in the range [0.0, 1.0].
        """
        ...
