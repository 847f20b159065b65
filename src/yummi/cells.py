"""Cells and physical rows produced while rendering a table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from yummi.utils import visible_width


@dataclass(frozen=True)
class Cell:
    """A display value and the color it should be printed with."""

    value: Any
    color: str | None = None

    @property
    def text(self) -> str:
        if self.value is None:
            return ""
        return str(self.value)


PhysicalRow = list[Optional[Cell]]


def split_lines(text: str) -> list[str]:
    """Split *text* on newlines. Empty text still gives one line."""
    lines = [line.removesuffix("\r") for line in text.split("\n")]
    if len(lines) > 1 and text.endswith("\n"):
        lines.pop()
    return lines


def normalize_lines(
    row: Sequence[Any],
    extract: Callable[[Any], str] | None = None,
    new: Callable[[str, Any], Any] | None = None,
) -> list[list[Any]]:
    """Expand one logical row into physical rows, one per line of text.

    Each entry of *row* is turned into text with *extract* and split on line
    breaks; the result has as many rows as the tallest entry. *new* builds
    the value stored for each line. Slots for entries with fewer lines are
    ``None``.
    """
    extract = extract or (lambda item: "" if item is None else str(item))
    new = new or (lambda line, item: line)

    split = [split_lines(extract(item)) for item in row]
    height = max((len(lines) for lines in split), default=0)
    result: list[list[Any]] = [[None] * len(row) for _ in range(height)]
    for column, (item, lines) in enumerate(zip(row, split)):
        for line_index, line in enumerate(lines):
            result[line_index][column] = new(line, item)
    return result


def normalize_cells(row: Sequence[Cell]) -> list[PhysicalRow]:
    """Split multi-line cells; every line keeps its cell's color."""
    return normalize_lines(
        row,
        extract=lambda cell: cell.text,
        new=lambda line, cell: Cell(line, cell.color),
    )


def transpose(rows: Sequence[Sequence[Any]]) -> list[list[Any]]:
    """Swap rows and columns. Ragged input is padded with ``None``."""
    columns = max((len(row) for row in rows), default=0)
    return [
        [row[j] if j < len(row) else None for row in rows]
        for j in range(columns)
    ]


def column_widths(rows: Sequence[Sequence[Cell | None]]) -> list[int]:
    """Return the widest visible text of each column. Missing cells count as 0."""
    widths: list[int] = []
    for row in rows:
        for j, cell in enumerate(row):
            width = visible_width(cell.text) if cell is not None else 0
            if j >= len(widths):
                widths.append(width)
            elif width > widths[j]:
                widths[j] = width
    return widths
