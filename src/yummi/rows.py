"""Row extraction: turn rows of any supported shape into ordered values.

Rows may be sequences (lists, tuples), mappings keyed by column alias, or
plain objects whose attributes are named after the aliases. The shape is
decided by an isinstance check, once per row.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any


class RowKind(Enum):
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OBJECT = "object"


@dataclass(frozen=True)
class CellValue:
    """A raw value taken from a row, with its position."""

    value: Any
    row_index: int | None = None
    column_index: int = 0
    row: Any = None

    @property
    def is_null(self) -> bool:
        return self.value is None


def classify_row(row: Any) -> RowKind:
    if isinstance(row, Mapping):
        return RowKind.MAPPING
    if isinstance(row, Sequence) and not isinstance(row, (str, bytes)):
        return RowKind.SEQUENCE
    return RowKind.OBJECT


def row_values(row: Any, aliases: Sequence[str] = ()) -> list[Any]:
    """Return the values of *row* in column order."""
    kind = classify_row(row)
    if kind is RowKind.SEQUENCE:
        return list(row)
    if kind is RowKind.MAPPING:
        if not aliases:
            return list(row.values())
        return [row.get(alias) for alias in aliases]
    if not aliases:
        return [row]
    return [getattr(row, alias, None) for alias in aliases]


def extract_row(
    row: Any,
    aliases: Sequence[str] = (),
    row_index: int | None = None,
) -> list[CellValue]:
    """Extract *row* into a list of :class:`CellValue` in column order."""
    return [
        CellValue(value=value, row_index=row_index, column_index=i, row=row)
        for i, value in enumerate(row_values(row, aliases))
    ]


class IndexedRow:
    """Read-only access to a row's values by column index or alias.

    Unknown aliases and out of range indexes give ``None``.
    """

    __slots__ = ("_aliases", "_values")

    def __init__(self, aliases: Sequence[str], values: Sequence[Any]) -> None:
        self._aliases = list(aliases)
        self._values = list(values)

    def __getitem__(self, key: int | str) -> Any:
        if isinstance(key, int):
            index = key
        elif key in self._aliases:
            index = self._aliases.index(key)
        else:
            return None
        if -len(self._values) <= index < len(self._values):
            return self._values[index]
        return None

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self):
        return iter(self._values)

    def __repr__(self) -> str:
        return f"IndexedRow({self._values!r})"
