"""
Exception hierarchy for human-time.

Every error raised by the library derives from HumanTimeError, so callers can
catch all of them with a single except clause and decide how to surface the
message (the CLI prints it to stderr and exits with status 1).
"""

from typing import Any

# Families listed in user-facing error messages
VALID_UNIT_FAMILIES = "milliseconds, microseconds, or seconds"


class HumanTimeError(Exception):
    """
    Base exception for all human-time errors.

    Example:
        try:
            text = format_duration(3600, "sec", config)
        except HumanTimeError as e:
            print(e.message, file=sys.stderr)
    """

    def __init__(self, message: str, **context: Any) -> None:
        """
        Initialize the exception with a message and optional context.

        Args:
            message: Human-readable error message
            **context: Additional context information (stored in self.context)
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        """String representation with context if available."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class InvalidUnitError(HumanTimeError):
    """Raised when a unit string does not belong to any unit family."""

    def __init__(self, unit: str) -> None:
        self.unit = unit
        super().__init__(
            f"Invalid unit '{unit}'. Valid options are: {VALID_UNIT_FAMILIES}."
        )


class InvalidDurationError(HumanTimeError):
    """Raised when a raw duration value is negative, non-integer, or too large."""

    def __init__(self, message: str, value: Any) -> None:
        self.value = value
        super().__init__(message)


class ConfigError(HumanTimeError):
    """
    Configuration-related errors.

    Examples:
        - Config file not found or unreadable
        - Invalid TOML/YAML syntax
        - Missing required configuration key
        - Invariant violated (default unit, format template)
    """

    pass


class InvalidConfigDefaultUnitError(ConfigError):
    """Raised when default_time_value_units does not normalize to a unit family."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid default_time_value_units: {value}. "
            f"Valid options are: {VALID_UNIT_FAMILIES}."
        )


class InvalidConfigFormatError(ConfigError):
    """Raised when formatting.format does not hold exactly two placeholders."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid formatting.format: {value}. "
            "It must contain exactly two sets of {}."
        )


class ConfigLoadError(ConfigError):
    """Raised when a configuration file cannot be found, read, or parsed."""

    pass
