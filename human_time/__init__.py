from importlib.metadata import PackageNotFoundError, version

from .config import (
    DEFAULT_CONFIG_FILENAME,
    Formatting,
    HumanTimeConfig,
    Units,
    find_config_file,
    load_config,
    validate_config,
)
from .exceptions import (
    ConfigError,
    ConfigLoadError,
    HumanTimeError,
    InvalidConfigDefaultUnitError,
    InvalidConfigFormatError,
    InvalidDurationError,
    InvalidUnitError,
)
from .time import (
    PLURAL_MARKER,
    Component,
    Duration,
    Magnitude,
    UnitFamily,
    decompose,
    format_components,
    format_duration,
    normalize_unit,
    recompose,
    render_label,
)

# Version is read from package metadata (pyproject.toml)
try:
    __version__ = version("human-time-cli")
except PackageNotFoundError:
    # Package not installed, use fallback (development mode)
    __version__ = "0.1.0-dev"

# Explicit public API
__all__ = [
    # Version
    "__version__",
    # Pipeline
    "format_duration",
    "format_components",
    "normalize_unit",
    "decompose",
    "recompose",
    "render_label",
    "PLURAL_MARKER",
    # Types
    "UnitFamily",
    "Magnitude",
    "Component",
    "Duration",
    # Configuration
    "HumanTimeConfig",
    "Formatting",
    "Units",
    "validate_config",
    "load_config",
    "find_config_file",
    "DEFAULT_CONFIG_FILENAME",
    # Exceptions
    "HumanTimeError",
    "InvalidUnitError",
    "InvalidDurationError",
    "ConfigError",
    "ConfigLoadError",
    "InvalidConfigDefaultUnitError",
    "InvalidConfigFormatError",
]
