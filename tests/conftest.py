"""Pytest configuration and shared fixtures"""

import os

import pytest

from fuzzy_match.algorithms import Levenshtein, SorensenDice
from fuzzy_match.config import Config, get_config

LANGUAGES = [("rust", 0), ("java", 1), ("lisp", 2)]


@pytest.fixture
def clean_env():
    """Fixture that temporarily clears FUZZYMATCH_* environment variables.

    This ensures Config tests see the true defaults without interference
    from environment variables that might be set in the user's shell.
    Variables set by the test itself are removed afterwards.
    """
    # Find all FUZZYMATCH_* environment variables
    fuzzymatch_vars = {
        key: value for key, value in os.environ.items() if key.startswith("FUZZYMATCH_")
    }

    # Temporarily remove them
    for key in fuzzymatch_vars:
        os.environ.pop(key, None)
    get_config.cache_clear()

    try:
        yield
    finally:
        for key in [k for k in os.environ if k.startswith("FUZZYMATCH_")]:
            os.environ.pop(key, None)
        # Restore original environment variables
        for key, value in fuzzymatch_vars.items():
            os.environ[key] = value
        get_config.cache_clear()


@pytest.fixture
def clean_config(clean_env):
    """Fixture that provides a Config instance with clean environment.

    This ensures tests can verify default values without environment
    variable interference.
    """
    return Config()


@pytest.fixture
def sorensen():
    """Fresh SorensenDice instance"""
    return SorensenDice()


@pytest.fixture
def levenshtein():
    """Fresh Levenshtein instance"""
    return Levenshtein()


@pytest.fixture
def languages():
    """Small haystack of (name, payload) pairs"""
    return list(LANGUAGES)
