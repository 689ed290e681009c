"""
Tests for the human-time exception hierarchy.
"""

import pytest

from human_time.exceptions import (
    ConfigError,
    ConfigLoadError,
    HumanTimeError,
    InvalidConfigDefaultUnitError,
    InvalidConfigFormatError,
    InvalidDurationError,
    InvalidUnitError,
)


@pytest.mark.unit
class TestHumanTimeError:
    """Test the base exception."""

    def test_message(self):
        e = HumanTimeError("something failed")
        assert e.message == "something failed"
        assert e.context == {}
        assert str(e) == "something failed"

    def test_context(self):
        e = HumanTimeError("something failed", path="/tmp/x.toml", size=3)
        assert e.context == {"path": "/tmp/x.toml", "size": 3}
        assert str(e) == "something failed (path=/tmp/x.toml, size=3)"


@pytest.mark.unit
class TestHierarchy:
    """Test that every error is catchable as HumanTimeError."""

    @pytest.mark.parametrize(
        "error",
        [
            InvalidUnitError("x"),
            InvalidDurationError("bad", -1),
            ConfigLoadError("missing"),
            InvalidConfigDefaultUnitError("x"),
            InvalidConfigFormatError("{}"),
        ],
    )
    def test_base_class(self, error):
        assert isinstance(error, HumanTimeError)

    @pytest.mark.parametrize(
        "error",
        [
            ConfigLoadError("missing"),
            InvalidConfigDefaultUnitError("x"),
            InvalidConfigFormatError("{}"),
        ],
    )
    def test_config_errors(self, error):
        assert isinstance(error, ConfigError)

    def test_unit_error_is_not_config_error(self):
        assert not isinstance(InvalidUnitError("x"), ConfigError)


@pytest.mark.unit
class TestMessages:
    """Test user-facing messages."""

    def test_invalid_unit(self):
        e = InvalidUnitError("hours")
        assert e.unit == "hours"
        assert str(e) == (
            "Invalid unit 'hours'. "
            "Valid options are: milliseconds, microseconds, or seconds."
        )

    def test_invalid_duration_keeps_value(self):
        e = InvalidDurationError("Duration cannot be negative, got -5", -5)
        assert e.value == -5
        assert str(e) == "Duration cannot be negative, got -5"
