"""
Output abstraction for the CLI.

Provides a testable interface for CLI output, allowing the command to be
tested without capturing stdout.
"""

import sys
from typing import Protocol, TextIO


class OutputWriter(Protocol):
    """Protocol for CLI output writing."""

    def write(self, text: str = "") -> None:
        """Write text with trailing newline."""
        ...


class ConsoleOutput:
    """
    Output writer that writes to a stream (stdout by default).

    Example:
        out = ConsoleOutput()
        out.write("1 hour")

        err = ConsoleOutput(sys.stderr)
        err.write("Invalid unit 'x'. ...")
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        """
        Initialize with optional output stream.

        Args:
            stream: Output stream (defaults to sys.stdout)
        """
        self._stream = stream if stream is not None else sys.stdout

    def write(self, text: str = "") -> None:
        """Write text with trailing newline."""
        print(text, file=self._stream)


class BufferedOutput:
    """
    Output writer that captures output to a list.

    Example:
        out = BufferedOutput()
        out.write("2 hours")
        assert out.lines == ["2 hours"]
        assert out.text == "2 hours\\n"
    """

    def __init__(self) -> None:
        """Initialize empty buffer."""
        self._lines: list[str] = []

    def write(self, text: str = "") -> None:
        """Write text with trailing newline."""
        self._lines.append(text)

    @property
    def lines(self) -> list[str]:
        """Get all output lines."""
        return self._lines.copy()

    @property
    def text(self) -> str:
        """Get all output as a single string with newlines."""
        return "\n".join(self._lines) + ("\n" if self._lines else "")
