"""
Logging for human-time.

Extends Python's standard logging with:
- A custom TRACE level below DEBUG
- Colored console output with ANSI escape sequences
- Structured logging with extra fields rendered as [key:value]
- Complete logging disable (level=False or level="false")
"""

import logging
from typing import TextIO

from .colors import ColorManager
from .config import LogConfig
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter
from .logger import Logger

# Define custom log levels for more granular debugging
logging.TRACE = LogConstants.CUSTOM_LEVELS["TRACE"]  # type: ignore[attr-defined]
logging.addLevelName(logging.TRACE, "TRACE")  # type: ignore[attr-defined]

LogConstants.LEVEL_NAMES["trace"] = logging.TRACE  # type: ignore[attr-defined]

ColorManager.add_custom_level_colors()


def create_lg(
    name: str,
    level: str | int | bool = "warning",
    colors: bool = True,
    stream: TextIO | None = None,
) -> Logger:
    """
    Create a logger with the specified configuration.

    Example:
        >>> lg = create_lg("/", "debug", colors=False)
    """
    config = LogConfig.from_params(level, colors=colors)
    return LoggerFactory.create(name, config, stream)


__all__ = [
    "ColorManager",
    "InvalidLogLevelError",
    "LogConfig",
    "LogConstants",
    "LogError",
    "LogFormatter",
    "Logger",
    "LoggerFactory",
    "create_lg",
]
