"""
Tests for human_time.time.delta (duration decomposition).
"""

import pytest

from human_time.exceptions import InvalidDurationError
from human_time.time.delta import (
    MAX_VALUE,
    Component,
    Duration,
    Magnitude,
    decompose,
    recompose,
)
from human_time.time.units import UnitFamily

DAY = 86_400_000_000
HOUR = 3_600_000_000
MINUTE = 60_000_000
SECOND = 1_000_000

# =============================================================================
# decompose() Tests
# =============================================================================


@pytest.mark.unit
class TestDecompose:
    """Test splitting a microsecond total into components."""

    def test_zero(self):
        """Test that a zero total yields no components."""
        assert decompose(0) == []

    def test_single_magnitudes(self):
        assert decompose(DAY) == [Component(Magnitude.DAY, 1)]
        assert decompose(HOUR) == [Component(Magnitude.HOUR, 1)]
        assert decompose(MINUTE) == [Component(Magnitude.MINUTE, 1)]
        assert decompose(SECOND) == [Component(Magnitude.SECOND, 1)]
        assert decompose(1_000) == [Component(Magnitude.MILLISECOND, 1)]
        assert decompose(1) == [Component(Magnitude.MICROSECOND, 1)]

    def test_all_magnitudes(self):
        total = 2 * DAY + 3 * HOUR + 4 * MINUTE + 5 * SECOND + 6_000 + 7
        assert decompose(total) == [
            Component(Magnitude.DAY, 2),
            Component(Magnitude.HOUR, 3),
            Component(Magnitude.MINUTE, 4),
            Component(Magnitude.SECOND, 5),
            Component(Magnitude.MILLISECOND, 6),
            Component(Magnitude.MICROSECOND, 7),
        ]

    def test_inner_zeros_dropped(self):
        """Test that zero components between nonzero ones are skipped."""
        assert decompose(DAY + 5 * SECOND) == [
            Component(Magnitude.DAY, 1),
            Component(Magnitude.SECOND, 5),
        ]

    def test_carry(self):
        """Test that 60 minutes become an hour, not 60 minutes."""
        assert decompose(60 * MINUTE) == [Component(Magnitude.HOUR, 1)]
        assert decompose(24 * HOUR + 1) == [
            Component(Magnitude.DAY, 1),
            Component(Magnitude.MICROSECOND, 1),
        ]

    def test_days_are_unbounded(self):
        assert decompose(400 * DAY) == [Component(Magnitude.DAY, 400)]

    def test_negative(self):
        with pytest.raises(InvalidDurationError):
            decompose(-1)

    def test_recompose(self):
        total = 90_061_000_001
        assert recompose(decompose(total)) == total
        assert recompose([]) == 0


# =============================================================================
# Duration Tests
# =============================================================================


@pytest.mark.unit
class TestDuration:
    """Test Duration construction from raw values."""

    def test_seconds(self):
        assert Duration.from_value(3600, UnitFamily.SECONDS).total_micros == HOUR

    def test_milliseconds(self):
        duration = Duration.from_value(3600, UnitFamily.MILLISECONDS)
        assert duration.total_micros == 3_600_000
        assert duration.components() == [
            Component(Magnitude.SECOND, 3),
            Component(Magnitude.MILLISECOND, 600),
        ]

    def test_microseconds(self):
        duration = Duration.from_value(3600, UnitFamily.MICROSECONDS)
        assert duration.components() == [
            Component(Magnitude.MILLISECOND, 3),
            Component(Magnitude.MICROSECOND, 600),
        ]

    def test_zero(self):
        duration = Duration.from_value(0, UnitFamily.SECONDS)
        assert duration.components() == []

    def test_max_value(self):
        """Test that the largest 64-bit value is accepted in every unit."""
        for unit in UnitFamily:
            duration = Duration.from_value(MAX_VALUE, unit)
            assert duration.total_micros == MAX_VALUE * unit.micros
            assert recompose(duration.components()) == duration.total_micros

    def test_immutable(self):
        duration = Duration.from_value(1, UnitFamily.SECONDS)
        with pytest.raises(AttributeError):
            duration.total_micros = 5  # type: ignore[misc]


@pytest.mark.unit
class TestDurationErrors:
    """Test rejection of invalid raw values."""

    def test_negative(self):
        with pytest.raises(InvalidDurationError, match="cannot be negative"):
            Duration.from_value(-1, UnitFamily.SECONDS)

    def test_too_large(self):
        with pytest.raises(InvalidDurationError, match="exceeds the maximum"):
            Duration.from_value(MAX_VALUE + 1, UnitFamily.SECONDS)

    @pytest.mark.parametrize("value", [1.5, "10", None, True])
    def test_not_an_integer(self, value):
        with pytest.raises(InvalidDurationError, match="must be an integer") as exc:
            Duration.from_value(value, UnitFamily.SECONDS)  # type: ignore[arg-type]
        assert exc.value.value is value


@pytest.mark.unit
class TestMagnitude:
    """Test Magnitude ordering and sizes."""

    def test_descending_order(self):
        sizes = [m.micros for m in Magnitude]
        assert sizes == sorted(sizes, reverse=True)

    def test_label_keys(self):
        assert [m.value for m in Magnitude] == ["d", "h", "m", "s", "ms", "us"]
