"""
Component formatting.

Renders decomposed components through the configured template and labels,
then joins them with the configured delimiter.

Example Usage:
    >>> config = HumanTimeConfig.default()
    >>> format_duration(3600, "sec", config)
    '1 hour'

    >>> format_duration(3600, "milli", config)
    '3 seconds, 600 milliseconds'

    >>> format_duration(5400, "sec", HumanTimeConfig.compact())
    '1h,30m'
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .delta import Component, Duration, Magnitude
from .units import normalize_unit

if TYPE_CHECKING:
    from ..config.config import HumanTimeConfig

# Marker embedded in labels where singular and plural forms diverge
PLURAL_MARKER = "(s)"
PLURAL_SUFFIX = "s"

# Positional slot token in the component template
PLACEHOLDER = "{}"

# Rendered in place of an empty decomposition
ZERO_COMPONENT = Component(Magnitude.SECOND, 0)


def render_label(label: str, count: int) -> str:
    """
    Resolve the plural marker in a label for count.

    Examples:
        >>> render_label("hour(s)", 1)
        'hour'
        >>> render_label("hour(s)", 2)
        'hours'
        >>> render_label("hour", 2)
        'hour'
    """
    if count == 1:
        return label.replace(PLURAL_MARKER, "")
    return label.replace(PLURAL_MARKER, PLURAL_SUFFIX)


def fill_template(template: str, count: int, label: str) -> str:
    """
    Fill the two positional slots of template with count and label.

    Slots are filled by position, so a label containing "{}" is inserted
    verbatim and never rebound. Slots beyond the second are left as-is.
    """
    parts = template.split(PLACEHOLDER, 2)
    if len(parts) < 3:
        # Validation rejects such templates; fill what slots there are.
        values = [str(count), label][: len(parts) - 1]
        return "".join(p + v for p, v in zip(parts, values + [""]))
    head, middle, tail = parts
    return f"{head}{count}{middle}{label}{tail}"


def render_component(component: Component, config: HumanTimeConfig) -> str:
    """Render one component with the configured label and template."""
    label = config.units.label_for(component.magnitude)
    return fill_template(
        config.formatting.format,
        component.count,
        render_label(label, component.count),
    )


def format_components(components: list[Component], config: HumanTimeConfig) -> str:
    """
    Render components and join them with the configured delimiter.

    An empty list renders as zero seconds.
    """
    if not components:
        components = [ZERO_COMPONENT]
    return config.formatting.delimiter_text.join(
        render_component(c, config) for c in components
    )


def format_duration(
    value: int, unit: str | None = None, config: HumanTimeConfig | None = None
) -> str:
    """
    Format a raw duration as a human-readable string.

    Args:
        value: Non-negative integer duration
        unit: Unit spelling; None uses config.default_time_value_units
        config: Formatting configuration; None uses the built-in default

    Returns:
        Formatted duration, e.g. "2 hours, 5 minutes"

    Raises:
        InvalidUnitError: If unit matches no unit family
        InvalidDurationError: If value is negative, non-integer or too large
    """
    if config is None:
        from ..config.config import HumanTimeConfig

        config = HumanTimeConfig.default()

    if unit is None:
        unit = config.default_time_value_units

    family = normalize_unit(unit)
    duration = Duration.from_value(value, family)
    return format_components(duration.components(), config)


__all__ = [
    "PLURAL_MARKER",
    "PLURAL_SUFFIX",
    "render_label",
    "fill_template",
    "render_component",
    "format_components",
    "format_duration",
]
