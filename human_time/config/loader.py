"""
Configuration file discovery and loading.

A configuration file is looked up next to the running executable first and
in the user's home directory second. TOML and YAML files share the same key
structure:

    default_time_value_units = "seconds"
    [formatting]
    format = "{} {}"
    delimiter_text = ", "
    [units]
    d = "day(s)"
    ...
"""

from __future__ import annotations

import logging
import os
import sys
import tomllib
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from ..exceptions import ConfigLoadError
from . import constants
from .config import HumanTimeConfig


def _executable_dir() -> Path | None:
    """Directory of the running script or frozen executable."""
    exe = sys.executable if getattr(sys, "frozen", False) else sys.argv[0]
    if not exe:
        return None
    return Path(exe).resolve().parent


def default_search_dirs() -> list[Path]:
    """Directories searched for a config file, in priority order."""
    dirs = []
    exe_dir = _executable_dir()
    if exe_dir is not None:
        dirs.append(exe_dir)
    try:
        dirs.append(Path.home())
    except RuntimeError:
        # No resolvable home directory
        pass
    return dirs


def find_config_file(
    filename: str | None = None,
    search_dirs: list[Path] | None = None,
    lg: logging.Logger | None = None,
) -> Path | None:
    """
    Locate a configuration file.

    Args:
        filename: File name to look for (default: DEFAULT_CONFIG_FILENAME)
        search_dirs: Directories to search (default: executable dir, then home)
        lg: Optional logger for discovery tracing

    Returns:
        Path of the first existing file, or None if none was found
    """
    name = filename or constants.DEFAULT_CONFIG_FILENAME
    dirs = search_dirs if search_dirs is not None else default_search_dirs()

    for directory in dirs:
        candidate = Path(directory) / name
        if lg is not None:
            lg.debug("looking for config", extra={"path": candidate})
        if candidate.is_file():
            return candidate
    return None


def _check_file_size(path: Path) -> None:
    """Check file size limit before reading."""
    file_size = os.path.getsize(path)
    if file_size > constants.MAX_CONFIG_SIZE_BYTES:
        raise ConfigLoadError(
            f"Configuration file is {file_size} bytes, exceeding maximum size of "
            f"{constants.MAX_CONFIG_SIZE_BYTES} bytes",
            path=path,
        )


def _parse(path: Path, text: str) -> Any:
    """Deserialize file contents according to the file suffix."""
    suffix = path.suffix.lower()
    if suffix in constants.TOML_SUFFIXES:
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigLoadError(
                f"Failed to parse the config file: {e}", path=path
            ) from e
    if suffix in constants.YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigLoadError(
                f"Failed to parse the config file: {e}", path=path
            ) from e
    raise ConfigLoadError(
        f"Unsupported config file type '{path.suffix}'", path=path
    )


def load_config(
    path: str | Path, lg: logging.Logger | None = None
) -> HumanTimeConfig:
    """
    Load and validate a configuration file.

    Args:
        path: Path to a .toml, .yaml or .yml file
        lg: Optional logger

    Returns:
        Validated HumanTimeConfig

    Raises:
        ConfigLoadError: If the file is missing, too large, unparsable or has
            missing or mistyped keys
        InvalidConfigDefaultUnitError: default_time_value_units is not a unit
        InvalidConfigFormatError: format does not hold exactly two "{}"
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigLoadError(f"Config file not found at this location: {path}")

    _check_file_size(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"Failed to read the config file: {e}", path=path) from e

    data = _parse(path, text)
    try:
        config = HumanTimeConfig.from_dict(data)
    except ConfigLoadError as e:
        raise ConfigLoadError(e.message, path=path) from e

    config.validate()
    if lg is not None:
        lg.debug(
            "loaded config",
            extra={"path": path, "unit": config.default_time_value_units},
        )
    return config
