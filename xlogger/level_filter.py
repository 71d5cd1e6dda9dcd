# xlogger/level_filter.py
"""Severity threshold check shared by all sinks."""

from typing import Union
from xlogger.config.config_types import Severity

LevelLike = Union[Severity, str]


def ordinal(level: LevelLike) -> int:
    """
    Relevance of a level, DEBUG (0) to EMERGENCY (7).

    Raises:
        UnknownSeverityError: If the level is not a PSR-3 level name
    """
    return Severity.parse(level).ordinal


def should_log(configured_minimum: LevelLike, candidate: LevelLike) -> bool:
    """
    Check if a record at `candidate` passes the `configured_minimum` threshold.

    Raises:
        UnknownSeverityError: If either level is unknown
    """
    return ordinal(candidate) >= ordinal(configured_minimum)


__all__ = ["LevelLike", "ordinal", "should_log"]
