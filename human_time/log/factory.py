"""
Factory for creating and configuring loggers.

Loggers write to stderr by default so that stdout carries only the
formatted duration.
"""

import logging
import sys
from typing import TextIO

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create(name: str, config: LogConfig, stream: TextIO | None = None) -> Logger:
        """
        Create a logger with the specified configuration.

        The logger is not registered with logging.getLogger(), so repeated
        calls (e.g. one per CLI invocation in tests) never share handlers.

        Args:
            name: Logger name
            config: Logger configuration
            stream: Output stream (defaults to sys.stderr)

        Returns:
            Configured logger instance

        Example:
            >>> config = LogConfig.from_params("debug", colors=False)
            >>> lg = LoggerFactory.create("/", config)
            >>> lg.debug("loaded config", extra={"path": "human-time.toml"})
        """
        lg = Logger(name, config)

        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        if config.level is not False:
            handler.setLevel(config.level)
        handler.setFormatter(LogFormatter(config))

        lg.addHandler(handler)
        lg.propagate = False
        return lg
