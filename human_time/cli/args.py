"""
Argument parsing helpers.

Help formatting that shows defaults, and argparse value types for the
duration argument.
"""

import argparse

from ..time.delta import MAX_VALUE


class DefaultsHelpFormatter(argparse.HelpFormatter):
    """
    Help formatter that appends default values to help text.

    Defaults that are suppressed, None or False are not shown.
    """

    def _get_help_string(self, action: argparse.Action) -> str:
        help_text = action.help or ""
        if action.default in (argparse.SUPPRESS, None, False):
            return help_text
        return help_text + f" (default: {action.default})"


def parse_time_value(text: str) -> int:
    """
    Parse a TIME_DURATION value.

    Accepts ASCII decimal digits with an optional leading "+" and
    surrounding whitespace.

    Raises:
        ValueError: If text is not an integer in [0, 2**64 - 1]
    """
    digits = text.strip().removeprefix("+")
    if not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"TIME_DURATION is not a decimal integer: {text!r}")
    value = int(digits)
    if value > MAX_VALUE:
        raise ValueError(f"TIME_DURATION exceeds {MAX_VALUE}: {value}")
    return value


def time_value_type(text: str) -> int:
    """argparse type for the positional TIME_DURATION argument."""
    try:
        return parse_time_value(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid TIME_DURATION: '{text}' (expected a non-negative integer)"
        ) from None
