"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the human-time test suite.
"""

import io
from pathlib import Path

import pytest

from human_time.config import constants as config_constants

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (may use filesystem)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests (run the installed command)"
    )


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture
def sample_config_dict() -> dict:
    """
    Provide a configuration dictionary in the persisted-state shape.

    Returns:
        dict: Full-label configuration
    """
    return {
        "default_time_value_units": "seconds",
        "formatting": {"format": "{} {}", "delimiter_text": ", "},
        "units": {
            "d": "day(s)",
            "h": "hour(s)",
            "m": "minute(s)",
            "s": "second(s)",
            "ms": "millisecond(s)",
            "us": "microsecond(s)",
        },
    }


COMPACT_TOML = """
default_time_value_units = "seconds"
[formatting]
format = "{}{}"
delimiter_text = ","
[units]
d = "d"
h = "h"
m = "m"
s = "s"
ms = "ms"
us = "us"
"""


@pytest.fixture
def compact_toml_file(tmp_path: Path) -> Path:
    """Write a compact-label TOML config and return its path."""
    path = tmp_path / "compact.toml"
    path.write_text(COMPACT_TOML, encoding="utf-8")
    return path


@pytest.fixture
def default_config_filename(monkeypatch) -> str:
    """Pin the discovered config file name regardless of the environment."""
    monkeypatch.setattr(config_constants, "DEFAULT_CONFIG_FILENAME", "human-time.toml")
    return "human-time.toml"


@pytest.fixture
def log_stream() -> io.StringIO:
    """Stream capturing logger output."""
    return io.StringIO()


# =============================================================================
# Test Collection Hooks
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """Add 'unit' marker to tests without other markers."""
    for item in items:
        if not any(
            mark.name in ["integration", "property", "e2e"]
            for mark in item.iter_markers()
        ):
            item.add_marker(pytest.mark.unit)
