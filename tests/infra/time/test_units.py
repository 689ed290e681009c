"""
Tests for human_time.time.units (unit normalization).
"""

import pytest

from human_time.exceptions import HumanTimeError, InvalidUnitError
from human_time.time.units import (
    UnitFamily,
    accepted_spellings,
    normalize_unit,
)

# =============================================================================
# normalize_unit() Tests
# =============================================================================


@pytest.mark.unit
class TestNormalizeUnit:
    """Test classification of unit spellings."""

    @pytest.mark.parametrize(
        "unit",
        [
            "ms",
            "milli",
            "millis",
            "millisec",
            "millisecs",
            "millisecond",
            "milliseconds",
        ],
    )
    def test_milliseconds_family(self, unit):
        assert normalize_unit(unit) is UnitFamily.MILLISECONDS

    @pytest.mark.parametrize(
        "unit",
        [
            "micro",
            "micros",
            "microsec",
            "microsecs",
            "microsecond",
            "microseconds",
        ],
    )
    def test_microseconds_family(self, unit):
        assert normalize_unit(unit) is UnitFamily.MICROSECONDS

    @pytest.mark.parametrize("unit", ["s", "sec", "secs", "second", "seconds"])
    def test_seconds_family(self, unit):
        assert normalize_unit(unit) is UnitFamily.SECONDS

    def test_case_insensitive(self):
        """Test that matching ignores case."""
        assert normalize_unit("Sec") is UnitFamily.SECONDS
        assert normalize_unit("MS") is UnitFamily.MILLISECONDS
        assert normalize_unit("MicroSeconds") is UnitFamily.MICROSECONDS


@pytest.mark.unit
class TestNormalizeUnitErrors:
    """Test rejection of unknown spellings."""

    def test_invalid(self):
        with pytest.raises(InvalidUnitError) as exc_info:
            normalize_unit("invalid")
        assert exc_info.value.unit == "invalid"
        assert str(exc_info.value) == (
            "Invalid unit 'invalid'. "
            "Valid options are: milliseconds, microseconds, or seconds."
        )

    @pytest.mark.parametrize(
        "unit",
        ["", "m", "min", "minutes", "us", "µs", "millisecondss", "xms", "secx"],
    )
    def test_unlisted_spellings(self, unit):
        """Test that only whole listed spellings match."""
        with pytest.raises(InvalidUnitError):
            normalize_unit(unit)

    def test_whitespace_not_trimmed(self):
        """Test that surrounding whitespace is left to the caller."""
        with pytest.raises(InvalidUnitError):
            normalize_unit(" sec ")

    def test_non_string(self):
        with pytest.raises(InvalidUnitError):
            normalize_unit(None)  # type: ignore[arg-type]

    def test_is_framework_error(self):
        """Test that InvalidUnitError can be caught as HumanTimeError."""
        with pytest.raises(HumanTimeError):
            normalize_unit("hours")


# =============================================================================
# Helper Tests
# =============================================================================


@pytest.mark.unit
class TestUnitHelpers:
    """Test accepted_spellings and UnitFamily.micros."""

    def test_accepted_spellings(self):
        assert "ms" in accepted_spellings(UnitFamily.MILLISECONDS)
        assert "ms" not in accepted_spellings(UnitFamily.SECONDS)
        assert accepted_spellings(UnitFamily.SECONDS)[0] == "s"

    def test_family_micros(self):
        assert UnitFamily.SECONDS.micros == 1_000_000
        assert UnitFamily.MILLISECONDS.micros == 1_000
        assert UnitFamily.MICROSECONDS.micros == 1
