"""Tests for exception hierarchy"""

import pytest

from fuzzy_match.exceptions import (
    EmptyHaystackError,
    FuzzyMatchError,
    UnknownAlgorithmError,
)


class TestFuzzyMatchError:
    """Test the base exception"""

    def test_defaults(self):
        """Test optional details default to empty containers"""
        error = FuzzyMatchError("boom")
        assert str(error) == "boom"
        assert error.message == "boom"
        assert error.errors == []
        assert error.suggestions == []
        assert error.context == {}

    def test_details(self):
        """Test details are kept on the instance"""
        error = FuzzyMatchError(
            "boom", errors=["e"], suggestions=["s"], context={"k": "v"}
        )
        assert error.errors == ["e"]
        assert error.suggestions == ["s"]
        assert error.context == {"k": "v"}

    def test_details_are_keyword_only(self):
        """Test details cannot be passed positionally"""
        with pytest.raises(TypeError):
            FuzzyMatchError("boom", ["e"])

    @pytest.mark.parametrize("subclass", [EmptyHaystackError, UnknownAlgorithmError])
    def test_subclasses(self, subclass):
        """Test all custom exceptions share the base"""
        assert issubclass(subclass, FuzzyMatchError)
        assert not issubclass(subclass, LookupError)
