"""
Configuration package.

This module provides:
- HumanTimeConfig, the immutable formatting configuration, and its validation
- load_config() and find_config_file() for TOML/YAML configuration files
"""

from .config import (
    PLACEHOLDER_COUNT,
    Formatting,
    HumanTimeConfig,
    Units,
    validate_config,
)
from .constants import DEFAULT_CONFIG_FILENAME, MAX_CONFIG_SIZE_BYTES
from .loader import default_search_dirs, find_config_file, load_config

__all__ = [
    # Model
    "HumanTimeConfig",
    "Formatting",
    "Units",
    "validate_config",
    "PLACEHOLDER_COUNT",
    # Loading
    "load_config",
    "find_config_file",
    "default_search_dirs",
    # Constants
    "DEFAULT_CONFIG_FILENAME",
    "MAX_CONFIG_SIZE_BYTES",
]
