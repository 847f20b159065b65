"""Defaults for tables and boxes. Colors can be switched off with YUMMI_NO_COLORS."""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

DEFAULT_COLSPAN = 2
DEFAULT_LAYOUT = "horizontal"
DEFAULT_BOX_COLOR = "white"

# Default alignment implied by each layout
LAYOUT_ALIGN: dict[str, str] = {
    "horizontal": "right",
    "vertical": "left",
}


@dataclass(frozen=True)
class TableStyle:
    """Colors for each part of a table. ``None`` means no color."""

    title: str | None = "intense_yellow"
    description: str | None = "intense_gray"
    header: str | None = "intense_blue"
    value: str | None = None

    @classmethod
    def plain(cls) -> TableStyle:
        return cls(title=None, description=None, header=None, value=None)

    def merge(self, overrides: Mapping[str, Any] | None) -> TableStyle:
        """Return a copy with the roles in *overrides* replaced.

        ``color`` is accepted as an alias for ``value``. Unknown roles are
        ignored.
        """
        if not overrides:
            return self
        roles = {f.name for f in fields(self)}
        changes = {}
        for key, color in overrides.items():
            key = "value" if key == "color" else key
            if key in roles:
                changes[key] = color
        return replace(self, **changes)


DEFAULT_STYLE = TableStyle()

_FALSE_VALUES = ("", "0", "false", "no", "off")


def colors_enabled_by_default() -> bool:
    """Return ``False`` when ``YUMMI_NO_COLORS`` is set to a truthy value."""
    value = os.environ.get("YUMMI_NO_COLORS", "")
    return value.strip().lower() in _FALSE_VALUES
