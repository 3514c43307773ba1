import fuzzy_match
from fuzzy_match.consts import (
    BIGRAM_SIZE,
    LEVENSHTEIN,
    PACKAGE_VERSION,
    SCORE_DECIMAL_PLACES,
    SCORE_SCALE,
    SORENSEN_DICE,
    SPACE,
)


class TestPackageConstants:
    """Test package constants are properly defined"""

    def test_package_version_defined(self):
        """Test that package version is defined"""
        assert isinstance(PACKAGE_VERSION, str)
        assert "." in PACKAGE_VERSION  # Should be semantic version
        assert fuzzy_match.__version__ == PACKAGE_VERSION

    def test_scoring_constants(self):
        """Test that scores are rounded to 5 decimal places"""
        assert SCORE_DECIMAL_PLACES == 5
        assert SCORE_SCALE == 100_000

    def test_bigram_constants(self):
        """Test bigram window and the discarded character"""
        assert BIGRAM_SIZE == 2
        assert SPACE == " "

    def test_registry_names(self):
        """Test registry names map to the bundled algorithms"""
        assert fuzzy_match.ALGORITHMS[SORENSEN_DICE] is fuzzy_match.SorensenDice
        assert fuzzy_match.ALGORITHMS[LEVENSHTEIN] is fuzzy_match.Levenshtein
