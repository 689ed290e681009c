"""
Input source for the CLI.

The duration comes from the positional argument or, when that is absent and
stdin is not a terminal, from the first line of stdin.
"""

from typing import TextIO

from .args import parse_time_value


class InputError(Exception):
    """Raised when no usable TIME_DURATION could be read."""

    def __init__(self, message: str, show_usage: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.show_usage = show_usage


MISSING_VALUE = "TIME_DURATION is required either as an argument or through stdin."
INVALID_STDIN_VALUE = "Invalid TIME_DURATION provided via stdin."


def _is_terminal(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def read_time_value(value: int | None, stdin: TextIO) -> int:
    """
    Resolve the raw duration value.

    Args:
        value: Value parsed from the command line, if any
        stdin: Stream to read from when value is None

    Returns:
        Non-negative integer duration

    Raises:
        InputError: If no value is available or stdin holds an invalid value
    """
    if value is not None:
        return value

    if _is_terminal(stdin):
        raise InputError(MISSING_VALUE, show_usage=True)

    line = stdin.readline()
    if not line.strip():
        raise InputError(MISSING_VALUE, show_usage=True)

    try:
        return parse_time_value(line)
    except ValueError:
        raise InputError(INVALID_STDIN_VALUE) from None
