"""Ready-made formatters for table columns."""

from __future__ import annotations

from typing import Any, Callable

UNITS: dict[str, dict[str, Any]] = {
    "byte": {"range": ["B", "KB", "MB", "GB", "TB"], "step": 1024},
}


def yes_or_no() -> Callable[[Any], str]:
    """Format truthy values as ``Yes`` and falsy ones as ``No``."""
    return lambda value: "Yes" if value else "No"


def round_to(precision: int) -> Callable[[Any], str]:
    """Format numbers with a fixed number of decimal places."""
    pattern = f"%.{precision}f"
    return lambda value: pattern % value


def format_unit(unit: str | dict[str, Any], value: float, precision: int = 1) -> Any:
    """Scale *value* to the largest unit it reaches.

    Values below the first step are returned untouched.
    """
    definition = UNITS[unit] if isinstance(unit, str) else unit
    result: Any = value
    for i, name in enumerate(definition["range"]):
        minimum = definition["step"] ** i
        if value >= minimum:
            result = f"%.{precision}f {name}" % (value / minimum)
    return result


def unit(unit: str | dict[str, Any], precision: int = 1) -> Callable[[Any], Any]:
    return lambda value: format_unit(unit, value, precision)


def bytes_unit(precision: int = 1) -> Callable[[Any], Any]:
    """Format sizes in bytes as ``B``, ``KB``, ``MB``, ``GB`` or ``TB``."""
    return unit("byte", precision)
