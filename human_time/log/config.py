"""
Configuration for the logging system.

LogConfig holds the level and color settings of one logger.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .constants import LogConstants
from .exceptions import InvalidLogLevelError


@dataclass(frozen=True)
class LogConfig:
    """Immutable logger configuration."""

    level: int | bool = logging.WARNING  # False disables logging
    colors: bool = True

    @staticmethod
    def _resolve_level(level: str | int | bool) -> int | bool:
        """Resolve level parameter to int or False."""
        if isinstance(level, bool):
            return False if not level else logging.INFO
        if isinstance(level, str):
            if level.isnumeric():
                return int(level)
            name = level.lower()
            if name in LogConstants.LEVEL_NAMES:
                return LogConstants.LEVEL_NAMES[name]
            raise InvalidLogLevelError(level)
        return level

    @classmethod
    def from_params(cls, level: str | int | bool, colors: bool = True) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        Args:
            level: Log level (name, numeric value, or False to disable logging)
            colors: Whether to enable colored output

        Raises:
            InvalidLogLevelError: If level is not a known level name
        """
        return cls(level=cls._resolve_level(level), colors=colors)
