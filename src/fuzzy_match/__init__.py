"""fuzzy_match Package

Find the best match for a string among a set of candidates, optionally
returning an item associated with each candidate. Candidates are scored with
a Sorensen-Dice coefficient and ties are broken with Levenshtein distance.
"""

from .algorithms import ALGORITHMS, Levenshtein, SorensenDice, get_algorithm
from .config import Config, get_config, setup_logging
from .consts import PACKAGE_VERSION
from .exceptions import EmptyHaystackError, FuzzyMatchError, UnknownAlgorithmError
from .matcher import fuzzy_match, fuzzy_match_with_algorithms
from .protocols import SimilarityAlgorithm

__version__ = PACKAGE_VERSION

__all__ = [
    "__version__",
    "fuzzy_match",
    "fuzzy_match_with_algorithms",
    "get_algorithm",
    "get_config",
    "setup_logging",
    "ALGORITHMS",
    "Config",
    "SimilarityAlgorithm",
    "SorensenDice",
    "Levenshtein",
    "FuzzyMatchError",
    "EmptyHaystackError",
    "UnknownAlgorithmError",
]
