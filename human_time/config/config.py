"""
Configuration model for duration formatting.

This module provides immutable pydantic models holding the default unit, the
output template, the join delimiter, and the per-magnitude labels, together
with the validation every configuration goes through before use.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..exceptions import (
    ConfigLoadError,
    InvalidConfigDefaultUnitError,
    InvalidConfigFormatError,
    InvalidUnitError,
)
from ..time.delta import Magnitude
from ..time.format import PLACEHOLDER
from ..time.units import UnitFamily, normalize_unit

PLACEHOLDER_COUNT = 2

# pydantic error types raised when a section is not a mapping
_NOT_A_TABLE = ("model_type", "model_attributes_type", "dict_type")


class Formatting(BaseModel):
    """How a single component is rendered and how components are joined."""

    format: str = Field(..., description="Template with two {} slots")
    delimiter_text: str = Field(..., description="Text between components")

    model_config = ConfigDict(frozen=True, extra="ignore")


class Units(BaseModel):
    """
    Labels for the six magnitudes.

    A label may embed the plural marker "(s)", e.g. "hour(s)" renders as
    "hour" for a count of 1 and "hours" otherwise.
    """

    d: str
    h: str
    m: str
    s: str
    ms: str
    us: str

    model_config = ConfigDict(frozen=True, extra="ignore")

    def label_for(self, magnitude: Magnitude) -> str:
        """Return the configured label for magnitude."""
        return str(getattr(self, magnitude.value))


class HumanTimeConfig(BaseModel):
    """
    Immutable formatting configuration.

    Construct it once per invocation, either with default() or from a file
    through load_config(), call validate(), then pass it to every formatting
    call. Use model_copy() to derive variants.

    Example:
        config = HumanTimeConfig.default()
        config = config.model_copy(
            update={"units": config.units.model_copy(update={"h": "hour"})}
        )
        config.validate()
    """

    default_time_value_units: str = Field(
        ..., description="Unit assumed when none is given"
    )
    formatting: Formatting
    units: Units

    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def default(cls) -> HumanTimeConfig:
        """Built-in configuration: full labels, "{} {}" template, ", " delimiter."""
        return cls(
            default_time_value_units="seconds",
            formatting=Formatting(format="{} {}", delimiter_text=", "),
            units=Units(
                d="day(s)",
                h="hour(s)",
                m="minute(s)",
                s="second(s)",
                ms="millisecond(s)",
                us="microsecond(s)",
            ),
        )

    @classmethod
    def compact(cls) -> HumanTimeConfig:
        """Abbreviated preset: "1h,30m" style output with no plural marker."""
        return cls(
            default_time_value_units="seconds",
            formatting=Formatting(format="{}{}", delimiter_text=","),
            units=Units(d="d", h="h", m="m", s="s", ms="ms", us="µs"),
        )

    @property
    def default_unit(self) -> UnitFamily:
        """
        Normalized default unit.

        Raises:
            InvalidConfigDefaultUnitError: If the configured name is not a unit
        """
        return _normalize_default_unit(self.default_time_value_units)

    def validate(self) -> HumanTimeConfig:  # type: ignore[override]
        """
        Check the structural invariants of this configuration.

        Pure: nothing is modified or logged.

        Returns:
            self, so calls can be chained

        Raises:
            InvalidConfigDefaultUnitError: default_time_value_units is not a unit
            InvalidConfigFormatError: format does not hold exactly two "{}"
        """
        _normalize_default_unit(self.default_time_value_units)

        fmt = self.formatting.format
        if fmt.count(PLACEHOLDER) != PLACEHOLDER_COUNT:
            raise InvalidConfigFormatError(fmt)

        return self

    @classmethod
    def from_dict(cls, data: Any) -> HumanTimeConfig:
        """
        Build a configuration from its persisted-state shape.

        Expected keys: default_time_value_units, formatting.{format,
        delimiter_text}, units.{d,h,m,s,ms,us}. Extra keys are ignored.
        The result is not validated.

        Raises:
            ConfigLoadError: If a key is missing, a value is not a string or
                a section is not a table
        """
        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigLoadError(describe_validation_error(e)) from e

    def to_dict(self) -> dict[str, Any]:
        """Return the persisted-state shape of this configuration."""
        return self.model_dump()


def describe_validation_error(error: ValidationError) -> str:
    """Turn the first pydantic error into a one-line message."""
    first = error.errors()[0]
    path = ".".join(str(part) for part in first["loc"])
    kind = type(first.get("input")).__name__

    if first["type"] == "missing":
        return f"Missing configuration key: {path}"
    if first["type"] in _NOT_A_TABLE:
        if not path:
            return f"Configuration must be a table, got {kind}"
        return f"Configuration section {path} must be a table, got {kind}"
    if first["type"] == "string_type":
        return f"Configuration key {path} must be a string, got {kind}"
    return f"Invalid configuration key {path}: {first['msg']}"


def _normalize_default_unit(value: str) -> UnitFamily:
    """Normalize default_time_value_units, reporting failure as a config error."""
    try:
        return normalize_unit(value)
    except InvalidUnitError:
        raise InvalidConfigDefaultUnitError(value) from None


def validate_config(config: HumanTimeConfig) -> HumanTimeConfig:
    """
    Validate a configuration.

    Convenience wrapper around HumanTimeConfig.validate().

    Raises:
        InvalidConfigDefaultUnitError: default_time_value_units is not a unit
        InvalidConfigFormatError: format does not hold exactly two "{}"
    """
    return config.validate()
