"""
Unit normalization.

Maps the free-form unit spellings accepted on the command line and in config
files to one of three unit families.

Example Usage:
    >>> normalize_unit("ms")
    <UnitFamily.MILLISECONDS: 'milliseconds'>

    >>> normalize_unit("Sec")
    <UnitFamily.SECONDS: 'seconds'>
"""

from enum import Enum

from ..exceptions import InvalidUnitError


class UnitFamily(Enum):
    """Interpretation of a raw duration value."""

    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"

    @property
    def micros(self) -> int:
        """Number of microseconds in one unit of this family."""
        return _MICROS_PER_UNIT[self]


_MICROS_PER_UNIT: dict[UnitFamily, int] = {
    UnitFamily.SECONDS: 1_000_000,
    UnitFamily.MILLISECONDS: 1_000,
    UnitFamily.MICROSECONDS: 1,
}

# Accepted spellings, compared against the lowercased unit string
_SPELLINGS: dict[UnitFamily, tuple[str, ...]] = {
    UnitFamily.MILLISECONDS: (
        "ms",
        "milli",
        "millis",
        "millisec",
        "millisecs",
        "millisecond",
        "milliseconds",
    ),
    UnitFamily.MICROSECONDS: (
        "micro",
        "micros",
        "microsec",
        "microsecs",
        "microsecond",
        "microseconds",
    ),
    UnitFamily.SECONDS: (
        "s",
        "sec",
        "secs",
        "second",
        "seconds",
    ),
}

_LOOKUP: dict[str, UnitFamily] = {
    spelling: family
    for family, spellings in _SPELLINGS.items()
    for spelling in spellings
}


def normalize_unit(unit: str) -> UnitFamily:
    """
    Classify a unit string into its unit family.

    Matching is case-insensitive and whole-string. Surrounding whitespace is
    not stripped.

    Args:
        unit: Unit spelling such as "ms", "micro" or "Seconds"

    Returns:
        The matching UnitFamily

    Raises:
        InvalidUnitError: If the string matches no family

    Examples:
        >>> normalize_unit("millisecs")
        <UnitFamily.MILLISECONDS: 'milliseconds'>
        >>> normalize_unit("MICRO")
        <UnitFamily.MICROSECONDS: 'microseconds'>
    """
    if not isinstance(unit, str):
        raise InvalidUnitError(str(unit))

    family = _LOOKUP.get(unit.lower())
    if family is None:
        raise InvalidUnitError(unit)
    return family


def accepted_spellings(family: UnitFamily) -> tuple[str, ...]:
    """Return the spellings that normalize to family."""
    return _SPELLINGS[family]


__all__ = [
    "UnitFamily",
    "normalize_unit",
    "accepted_spellings",
]
