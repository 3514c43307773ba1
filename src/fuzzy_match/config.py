"""Configuration management."""

import logging
from functools import cache

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings

from .consts import PACKAGE_NAME


class Config(BaseSettings):
    """Configuration for logging of applications embedding fuzzy_match."""

    model_config = ConfigDict(
        env_prefix="FUZZYMATCH_", case_sensitive=False, extra="ignore"
    )
    log_level: str = Field(
        default="INFO",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
        description="Logging level",
    )


@cache
def get_config() -> Config:
    """Get a cached Config instance."""
    return Config()


def setup_logging(log_level: str | None = None) -> logging.Logger:
    """Configure logging for an application embedding fuzzy_match.

    The library itself never calls this; it only logs through named loggers.

    Args:
        log_level: Level name. Defaults to the configured FUZZYMATCH_LOG_LEVEL.

    Returns:
        The package logger.
    """
    if log_level is None:
        log_level = get_config().log_level
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,  # Override any existing configuration
    )
    return logging.getLogger(PACKAGE_NAME)
