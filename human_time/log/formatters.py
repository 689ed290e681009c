"""
Log formatter for the logging system.

Renders "[time] [L] message" followed by structured extra fields as
[key:value] and the logger name, with or without ANSI colors.
"""

import collections
import logging
from typing import Any

from .colors import ColorManager
from .config import LogConfig
from .constants import LogConstants


def _extra_items(record: logging.LogRecord) -> list[tuple[str, Any]]:
    """Return extra fields attached by Logger, sorted unless ordered."""
    extra = getattr(record, "__ht__extra", None)
    if not extra:
        return []
    if isinstance(extra, collections.OrderedDict):
        return list(extra.items())
    return sorted(extra.items())


def _render_value(value: Any) -> str:
    """Render one extra field value."""
    if isinstance(value, Exception):
        return value.__class__.__name__
    if isinstance(value, (list, tuple)):
        return ",".join(map(str, value))
    return str(value)


def _padding(record: logging.LogRecord) -> str:
    """Spaces that line up structured fields after short messages."""
    width = len(record.getMessage())
    return " " * max(1, LogConstants.DEFAULT_RULE_WIDTH - width)


class LogFormatter(logging.Formatter):
    """
    Console formatter with optional colors and structured fields.

    Example output (colors disabled):
        [12:34:56,789] [D] loaded config        [path:/home/me/human-time.toml] [/]
    """

    def __init__(self, config: LogConfig):
        """
        Initialize the log formatter.

        Args:
            config: Logger configuration
        """
        super().__init__(LogConstants.DEFAULT_FORMAT, datefmt="%H:%M:%S")
        self._config = config

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        """Format timestamp as HH:MM:SS,mmm."""
        s = super().formatTime(record, datefmt or self.datefmt)
        return f"{s},{int(record.msecs):03d}"

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record.

        Args:
            record: Log record to format

        Returns:
            Formatted log line
        """
        line = super().format(record)
        if self._config.colors:
            return self._format_colored(record, line)
        return self._format_plain(record, line)

    def _format_plain(self, record: logging.LogRecord, line: str) -> str:
        """Append fields and logger name without colors."""
        fields = "".join(
            f" [{key}:{_render_value(value)}]" for key, value in _extra_items(record)
        )
        return f"{line}{_padding(record)}{fields.lstrip()} [{record.name}]"

    def _format_colored(self, record: logging.LogRecord, line: str) -> str:
        """Wrap the line in level colors, fields bold, metadata gray."""
        col = ColorManager.get_color_for_level(record.levelno) or ColorManager.DEFAULT
        bold = ColorManager.create_bold_color(col)
        col += "m"
        gray = ColorManager.create_gray_level(9) + "m"

        fields = " ".join(
            f"{col}{key}[{bold}{_render_value(value)}{ColorManager.RESET}{col}]"
            for key, value in _extra_items(record)
        )
        out = col + line + _padding(record) + fields
        out += f"{ColorManager.RESET}{gray} [{record.name}]{ColorManager.RESET}"
        return out
