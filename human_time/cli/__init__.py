"""Command line interface for human-time."""

from .cli import build_parser, main, resolve_config, run
from .output import BufferedOutput, ConsoleOutput, OutputWriter

__all__ = [
    "main",
    "run",
    "build_parser",
    "resolve_config",
    "OutputWriter",
    "ConsoleOutput",
    "BufferedOutput",
]
