"""
Constants for the logging system.

Format strings, the custom TRACE level and the level-name table used when
resolving --log-level values.
"""

import logging


class LogConstants:
    """Constants for the logging system."""

    # Default format string
    DEFAULT_FORMAT: str = "[%(asctime)s] [%(levelname).1s] %(message)s"

    # Messages are padded to this width before structured fields
    DEFAULT_RULE_WIDTH: int = 60

    # Custom log levels
    CUSTOM_LEVELS: dict[str, int] = {"TRACE": 5}

    # Log level names for resolution (custom levels are added on package import)
    LEVEL_NAMES: dict[str, int | bool] = {
        "critical": logging.CRITICAL,
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "false": False,  # Special value to disable all logging
    }

    # ANSI escape sequences
    RESET: str = "\x1b[0m"

    # Gray level range for trace and metadata
    GRAY_BASE: int = 232
    GRAY_MAX_LEVELS: int = 24
