"""High-value constants for the fuzzy_match package."""

# Package metadata
PACKAGE_VERSION = "0.2.0"
PACKAGE_NAME = "fuzzy-match"

# Scoring consts
SCORE_DECIMAL_PLACES = 5
SCORE_SCALE = 10**SCORE_DECIMAL_PLACES
MIN_SCORE = 0.0
MAX_SCORE = 1.0

# Sorensen-Dice consts
BIGRAM_SIZE = 2
SPACE = " "  # bigrams containing this are discarded

# Registry names
SORENSEN_DICE = "sorensen_dice"
LEVENSHTEIN = "levenshtein"
