"""
Duration decomposition.

Converts a raw integer plus a unit family into a total number of microseconds
and splits it into whole-number components, largest magnitude first.

Example Usage:
    >>> Duration.from_value(3600, UnitFamily.MILLISECONDS).components()
    [Component(magnitude=<Magnitude.SECOND: 's'>, count=3), Component(magnitude=<Magnitude.MILLISECOND: 'ms'>, count=600)]

    >>> decompose(0)
    []
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from ..exceptions import InvalidDurationError
from .units import UnitFamily

# Time conversion constants, in microseconds
MICROS_PER_DAY = 86_400_000_000
MICROS_PER_HOUR = 3_600_000_000
MICROS_PER_MINUTE = 60_000_000
MICROS_PER_SECOND = 1_000_000
MICROS_PER_MILLISECOND = 1_000

# Raw values are limited to the range of a 64-bit unsigned integer
MAX_VALUE = 2**64 - 1


class Magnitude(Enum):
    """Time granularities, in descending order. Values are config label keys."""

    DAY = "d"
    HOUR = "h"
    MINUTE = "m"
    SECOND = "s"
    MILLISECOND = "ms"
    MICROSECOND = "us"

    @property
    def micros(self) -> int:
        """Length of one unit of this magnitude in microseconds."""
        return _MAGNITUDE_MICROS[self]


_MAGNITUDE_MICROS: dict[Magnitude, int] = {
    Magnitude.DAY: MICROS_PER_DAY,
    Magnitude.HOUR: MICROS_PER_HOUR,
    Magnitude.MINUTE: MICROS_PER_MINUTE,
    Magnitude.SECOND: MICROS_PER_SECOND,
    Magnitude.MILLISECOND: MICROS_PER_MILLISECOND,
    Magnitude.MICROSECOND: 1,
}


class Component(NamedTuple):
    """A single (magnitude, count) pair."""

    magnitude: Magnitude
    count: int


def _validate_value(value: int) -> None:
    """
    Validate a raw duration value.

    Raises:
        InvalidDurationError: If value is not an int in [0, MAX_VALUE]
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDurationError(
            f"Duration must be an integer, got {type(value).__name__}", value
        )
    if value < 0:
        raise InvalidDurationError(f"Duration cannot be negative, got {value}", value)
    if value > MAX_VALUE:
        raise InvalidDurationError(
            f"Duration {value} exceeds the maximum of {MAX_VALUE}", value
        )


def decompose(total_micros: int) -> list[Component]:
    """
    Split a total number of microseconds into nonzero components.

    Args:
        total_micros: Non-negative total in microseconds

    Returns:
        Components with count > 0, from days down to microseconds. Empty for
        a zero total.

    Examples:
        >>> decompose(3_600_000_000)
        [Component(magnitude=<Magnitude.HOUR: 'h'>, count=1)]
        >>> decompose(90_061_000_001)
        [Component(magnitude=<Magnitude.DAY: 'd'>, count=1), Component(magnitude=<Magnitude.HOUR: 'h'>, count=1), Component(magnitude=<Magnitude.MINUTE: 'm'>, count=1), Component(magnitude=<Magnitude.SECOND: 's'>, count=1), Component(magnitude=<Magnitude.MICROSECOND: 'us'>, count=1)]
    """
    if total_micros < 0:
        raise InvalidDurationError(
            f"Duration cannot be negative, got {total_micros}", total_micros
        )

    components = []
    remaining = total_micros
    for magnitude in Magnitude:
        count, remaining = divmod(remaining, magnitude.micros)
        if count > 0:
            components.append(Component(magnitude, count))
    return components


def recompose(components: list[Component]) -> int:
    """Return the total in microseconds represented by components."""
    return sum(c.count * c.magnitude.micros for c in components)


@dataclass(frozen=True)
class Duration:
    """
    Immutable elapsed time held at microsecond resolution.

    Build it from a raw value with from_value() rather than directly.
    """

    total_micros: int

    @classmethod
    def from_value(cls, value: int, unit: UnitFamily) -> "Duration":
        """
        Create a Duration from a raw value interpreted in unit.

        Args:
            value: Non-negative integer, at most 2**64 - 1
            unit: Unit family the value is expressed in

        Raises:
            InvalidDurationError: If value is invalid
        """
        _validate_value(value)
        return cls(value * unit.micros)

    def components(self) -> list[Component]:
        """Return the nonzero components of this duration."""
        return decompose(self.total_micros)


__all__ = [
    "Component",
    "Duration",
    "Magnitude",
    "decompose",
    "recompose",
    "MAX_VALUE",
]
