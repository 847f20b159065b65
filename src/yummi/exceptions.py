"""Exceptions raised while configuring tables and boxes."""

from __future__ import annotations


class YummiError(Exception):
    """Base exception for all yummi configuration errors."""


class UndefinedColumnError(YummiError, KeyError):
    """A column reference (alias) that does not resolve to an index."""

    def __init__(self, column: object) -> None:
        self.column = column
        super().__init__(f"Undefined column {column!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class UnsupportedLayoutError(YummiError, ValueError):
    """A layout other than ``horizontal`` or ``vertical``."""

    def __init__(self, layout: object) -> None:
        self.layout = layout
        super().__init__(f"Unsupported layout {layout!r}")


class UnsupportedAlignmentError(YummiError, ValueError):
    """An alignment other than ``left`` or ``right``."""

    def __init__(self, alignment: object) -> None:
        self.alignment = alignment
        super().__init__(f"Unsupported alignment {alignment!r}")
