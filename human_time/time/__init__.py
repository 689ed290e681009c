"""Duration normalization, decomposition, and formatting."""

# Decomposition
from .delta import MAX_VALUE, Component, Duration, Magnitude, decompose, recompose

# Formatting
from .format import (
    PLURAL_MARKER,
    PLURAL_SUFFIX,
    fill_template,
    format_components,
    format_duration,
    render_component,
    render_label,
)

# Unit normalization
from .units import UnitFamily, accepted_spellings, normalize_unit

__all__ = [
    # Units
    "UnitFamily",
    "normalize_unit",
    "accepted_spellings",
    # Decomposition
    "Component",
    "Duration",
    "Magnitude",
    "decompose",
    "recompose",
    "MAX_VALUE",
    # Formatting
    "PLURAL_MARKER",
    "PLURAL_SUFFIX",
    "render_label",
    "fill_template",
    "render_component",
    "format_components",
    "format_duration",
]
