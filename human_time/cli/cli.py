"""
human-time command line interface.

Usage:
    human-time 3600                    # 1 hour
    human-time 3600 -u milli           # 3 seconds, 600 milliseconds
    echo 90061 | human-time            # 1 day, 1 hour, 1 minute, 1 second
    human-time 5400 -c                 # use human-time.toml labels
    human-time 5400 --config-file ./compact.yaml
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

import human_time
from human_time.config import (
    HumanTimeConfig,
    find_config_file,
    load_config,
)
from human_time.config import constants as config_constants
from human_time.exceptions import ConfigLoadError, HumanTimeError
from human_time.log import LogConstants, Logger, create_lg
from human_time.time import UnitFamily, accepted_spellings, format_duration

from .args import DefaultsHelpFormatter, time_value_type
from .input import InputError, read_time_value
from .output import ConsoleOutput, OutputWriter

# Prepended to every message written to stderr
ERROR_PREFIX = "Error: "


def _unit_help() -> str:
    """Describe the accepted unit spellings."""
    families = ", ".join(
        f"{family.value} ({'/'.join(accepted_spellings(family)[:3])}...)"
        for family in UnitFamily
    )
    return (
        f"unit of TIME_DURATION: {families}. "
        "If not specified, the configured default unit is used"
    )


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="human-time",
        description="Converts a time duration to a human-readable format",
        formatter_class=DefaultsHelpFormatter,
    )
    parser.add_argument(
        "time_value",
        metavar="TIME_DURATION",
        nargs="?",
        type=time_value_type,
        help="the time duration to convert; read from stdin when omitted",
    )
    parser.add_argument("-u", "--unit", help=_unit_help())
    parser.add_argument(
        "-c",
        "--config",
        action="store_true",
        help=(
            f"load {config_constants.DEFAULT_CONFIG_FILENAME} from the executable "
            "directory or the home directory"
        ),
    )
    parser.add_argument(
        "--config-file",
        metavar="PATH",
        help="load configuration from PATH (.toml, .yaml or .yml)",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=sorted(LogConstants.LEVEL_NAMES),
        help="log level for diagnostics written to stderr",
    )
    parser.add_argument(
        "--no-colors",
        action="store_true",
        help="disable colored log output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"human-time {human_time.__version__}",
    )
    return parser


def resolve_config(args: argparse.Namespace, lg: Logger) -> HumanTimeConfig:
    """
    Select and validate the configuration for this invocation.

    Raises:
        ConfigError: If the configuration cannot be found, loaded or validated
    """
    if args.config_file:
        return load_config(args.config_file, lg)

    if args.config:
        path = find_config_file(lg=lg)
        if path is None:
            raise ConfigLoadError(
                f"Config file '{config_constants.DEFAULT_CONFIG_FILENAME}' "
                "not found in the executable directory or home directory."
            )
        return load_config(path, lg)

    lg.trace("using built-in config")
    return HumanTimeConfig.default().validate()


def run(
    args: argparse.Namespace,
    out: OutputWriter,
    err: OutputWriter,
    stdin: TextIO,
    lg: Logger,
    usage: str = "",
) -> int:
    """
    Run one conversion.

    Returns:
        Exit status: 0 on success, 1 on any error
    """
    try:
        config = resolve_config(args, lg)
        value = read_time_value(args.time_value, stdin)
        unit = args.unit.strip() if args.unit is not None else None
        lg.debug(
            "formatting duration",
            extra={
                "value": value,
                "unit": unit or config.default_time_value_units,
                "source": "argument" if args.time_value is not None else "stdin",
            },
        )
        text = format_duration(value, unit, config)
    except InputError as e:
        err.write(ERROR_PREFIX + e.message)
        if e.show_usage and usage:
            err.write(usage.rstrip())
        return 1
    except HumanTimeError as e:
        lg.debug("conversion failed", extra={"exception": e})
        err.write(ERROR_PREFIX + str(e))
        return 1

    out.write(text)
    return 0


def main(
    argv: list[str] | None = None,
    out: OutputWriter | None = None,
    err: OutputWriter | None = None,
    stdin: TextIO | None = None,
    log_stream: TextIO | None = None,
) -> int:
    """Main entry point for the human-time CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    lg = create_lg(
        "/",
        args.log_level,
        colors=not args.no_colors,
        stream=log_stream if log_stream is not None else sys.stderr,
    )

    return run(
        args,
        out=out if out is not None else ConsoleOutput(),
        err=err if err is not None else ConsoleOutput(sys.stderr),
        stdin=stdin if stdin is not None else sys.stdin,
        lg=lg,
        usage=parser.format_usage(),
    )


if __name__ == "__main__":
    sys.exit(main())
