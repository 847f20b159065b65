"""Table component - aligned, formatted and colorized terminal tables."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Mapping
from typing import IO, TYPE_CHECKING, Any, Callable

from yummi.cells import (
    Cell,
    PhysicalRow,
    column_widths,
    normalize_cells,
    split_lines,
    transpose,
)
from yummi.color import colorize
from yummi.components import ComponentSpec, component_spec, to_colorizer, to_formatter
from yummi.config import (
    DEFAULT_COLSPAN,
    DEFAULT_LAYOUT,
    DEFAULT_STYLE,
    LAYOUT_ALIGN,
    TableStyle,
    colors_enabled_by_default,
)
from yummi.context import ContextRegistry, ContextScope, TableContext
from yummi.exceptions import UndefinedColumnError, UnsupportedLayoutError
from yummi.rows import CellValue, IndexedRow, extract_row, row_values
from yummi.utils import align_text, check_alignment, visible_width

if TYPE_CHECKING:
    from yummi.text_box import TextBox

logger = logging.getLogger(__name__)


def alias_for(header: str) -> str:
    """Derive a column alias from header text: ``"Work Phone"`` -> ``"work_phone"``."""
    return str(header).lower().replace(" ", "_").replace("\n", "_")


class Table:
    """A table that formats and colorizes its values for terminal output.

    Columns are referenced by index or by alias. Setting a header derives
    the aliases from its texts unless aliases were set explicitly::

        table = Table(title="Cash Flow")
        table.header = ["Description", "Value", "Total"]
        table.format(["value", "total"], with_="%.2f")
        table.colorize("value", using=lambda v: "red" if v < 0 else None)
        table.data = [["Deposit", 100, 100], ["Withdraw", -50, 50]]
        table.print()

    Rendering recomputes everything from the current state, so a table may
    be rendered any number of times. A table must not be mutated while it
    is being rendered.
    """

    def __init__(
        self,
        title: str | None = None,
        description: str | None = None,
        header: Iterable[str] | str | None = None,
        data: Iterable[Any] | None = None,
        style: TableStyle | Mapping[str, Any] | None = None,
        colspan: int = DEFAULT_COLSPAN,
        layout: str = DEFAULT_LAYOUT,
        align: str | None = None,
        aliases: Iterable[str] | None = None,
    ) -> None:
        self.title = title
        self.description = description
        self.colspan = colspan

        self._style = DEFAULT_STYLE
        self.style = style
        self._colors = True

        self._layout = DEFAULT_LAYOUT
        self._default_align = LAYOUT_ALIGN[DEFAULT_LAYOUT]
        self._explicit_align = False
        self.layout = layout
        if align is not None:
            self.default_align = align

        self._align: dict[int, str] = {}
        self._contexts = ContextRegistry()

        self._aliases: list[str] = list(aliases) if aliases else []
        self._header: list[str] = []
        if header is not None:
            self.header = header

        self._data: list[Any] = list(data) if data is not None else []

        if not colors_enabled_by_default():
            self.no_colors()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def style(self) -> TableStyle:
        return self._style

    @style.setter
    def style(self, style: TableStyle | Mapping[str, Any] | None) -> None:
        if isinstance(style, TableStyle):
            self._style = style
        else:
            self._style = DEFAULT_STYLE.merge(style)

    @property
    def colors_enabled(self) -> bool:
        return self._colors

    @property
    def layout(self) -> str:
        return self._layout

    @layout.setter
    def layout(self, layout: str) -> None:
        name = getattr(layout, "value", layout)
        if name not in LAYOUT_ALIGN:
            raise UnsupportedLayoutError(layout)
        self._layout = name
        if not self._explicit_align:
            self._default_align = LAYOUT_ALIGN[name]

    @property
    def default_align(self) -> str:
        return self._default_align

    @default_align.setter
    def default_align(self, alignment: str) -> None:
        self._default_align = check_alignment(alignment)
        self._explicit_align = True

    @property
    def aliases(self) -> list[str]:
        return list(self._aliases)

    @aliases.setter
    def aliases(self, aliases: Iterable[str]) -> None:
        self._aliases = [str(alias) for alias in aliases]

    @property
    def header(self) -> list[str]:
        return list(self._header)

    @header.setter
    def header(self, header: Iterable[str] | str) -> None:
        """Set the header texts. Line breaks in a text give a multi-line header.

        Aliases are derived from the texts when none are defined yet, and
        only columns that have a header (even an empty one) are printed.
        """
        if isinstance(header, str):
            header = [header]
        self._header = ["" if text is None else str(text) for text in header]
        if not self._aliases:
            self._aliases = [alias_for(text) for text in self._header]

    @property
    def data(self) -> list[Any]:
        return self._data

    @data.setter
    def data(self, data: Iterable[Any]) -> None:
        self._data = list(data)

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------

    def add(self, row: Any) -> Table:
        """Append *row*. Mapping rows are matched to columns by alias."""
        self._data.append(row)
        return self

    __lshift__ = add

    def row(self, index: int) -> Any:
        return self._data[index]

    def column(self, ref: int | str) -> list[Any]:
        """Return the raw values of a column, referenced by index or alias."""
        index = self.parse_index(ref)
        if index is None:
            raise UndefinedColumnError(ref)
        column = []
        for row in self._data:
            values = row_values(row, self._aliases)
            column.append(values[index] if index < len(values) else None)
        return column

    def parse_index(self, ref: int | str) -> int | None:
        """Resolve a column alias or index. Unknown aliases give ``None``."""
        if isinstance(ref, int) and not isinstance(ref, bool):
            return ref
        ref = str(ref)
        if ref in self._aliases:
            return self._aliases.index(ref)
        return None

    # ------------------------------------------------------------------
    # Customization
    # ------------------------------------------------------------------

    def no_colors(self) -> None:
        """Render without any escape sequence."""
        self._style = TableStyle.plain()
        self._colors = False

    def align(self, indexes: int | str | Iterable[int | str], alignment: str) -> None:
        """Set the alignment (``left`` or ``right``) of one or more columns.

        Raises :class:`UndefinedColumnError` if an alias does not resolve;
        no column is changed in that case.
        """
        check_alignment(alignment)
        resolved = []
        for ref in _refs(indexes):
            index = self.parse_index(ref)
            if index is None:
                raise UndefinedColumnError(ref)
            resolved.append(index)
        for index in resolved:
            self._align[index] = alignment

    def format(
        self,
        indexes: int | str | Iterable[int | str],
        spec: ComponentSpec | Callable[..., Any] | None = None,
        *,
        using: Callable[[Any], Any] | None = None,
        with_: str | None = None,
        context: TableContext | ContextScope | None = None,
    ) -> None:
        """Set a formatter for one or more columns.

        The formatter is called with the column value and returns the value
        to display. ``with_`` takes a ``%`` pattern such as ``"%.2f"``.
        An alias that does not resolve sets the null formatter instead.
        """
        component = component_spec(spec, using, with_)
        target = self._target(context)
        for ref in _refs(indexes):
            index = self.parse_index(ref)
            if index is None:
                logger.debug("column %r not found, formatting null values", ref)
                target.null_formatter = to_formatter(component)
            else:
                target.formatters[index] = to_formatter(component)

    def format_null(
        self,
        spec: ComponentSpec | Callable[..., Any] | None = None,
        *,
        using: Callable[[Any], Any] | None = None,
        with_: str | None = None,
        context: TableContext | ContextScope | None = None,
    ) -> None:
        """Set the formatter used for ``None`` values in every column."""
        component = component_spec(spec, using, with_)
        self._target(context).null_formatter = to_formatter(component)

    def colorize(
        self,
        indexes: int | str | Iterable[int | str],
        spec: ComponentSpec | Callable[..., Any] | None = None,
        *,
        using: Callable[[Any], str | None] | None = None,
        with_: str | None = None,
        context: TableContext | ContextScope | None = None,
    ) -> None:
        """Set a colorizer for one or more columns.

        The colorizer is called with the column value and returns a color,
        or ``None`` for the default value color. ``with_`` gives one color
        for every value. An alias that does not resolve sets the null
        colorizer instead.
        """
        component = component_spec(spec, using, with_)
        target = self._target(context)
        for ref in _refs(indexes):
            index = self.parse_index(ref)
            if index is None:
                logger.debug("column %r not found, colorizing null values", ref)
                target.null_colorizer = to_colorizer(component)
            else:
                target.colorizers[index] = to_colorizer(component)

    def colorize_null(
        self,
        spec: ComponentSpec | Callable[..., Any] | None = None,
        *,
        using: Callable[[Any], str | None] | None = None,
        with_: str | None = None,
        context: TableContext | ContextScope | None = None,
    ) -> None:
        """Set the colorizer used for ``None`` values in every column."""
        component = component_spec(spec, using, with_)
        self._target(context).null_colorizer = to_colorizer(component)

    def colorize_row(
        self,
        spec: ComponentSpec | Callable[..., Any] | None = None,
        *,
        using: Callable[[int, IndexedRow], str | None] | None = None,
        with_: str | None = None,
        context: TableContext | ContextScope | None = None,
    ) -> None:
        """Set a colorizer for entire rows, overriding the column colors.

        It is called with the row index and an :class:`IndexedRow` and
        returns a color, or ``None`` to keep the column colors::

            table.colorize_row(lambda i, row: "red" if row["value"] < 0 else None)
        """
        component = component_spec(spec, using, with_)
        self._target(context).row_colorizer = to_colorizer(component)

    def top(
        self,
        rows: int = 1,
        block: Callable[[ContextScope], Any] | None = None,
    ) -> ContextScope:
        """Group customizations for *rows* rows at the top of the table.

        Each call creates a new group; groups claim rows in the order they
        are declared. The returned scope (also passed to *block*) registers
        customizations for the group only::

            with table.top(rows=2) as first:
                first.colorize("value", with_="green")
        """
        scope = ContextScope(self, self._contexts.add_top(rows))
        if block is not None:
            block(scope)
        return scope

    def bottom(
        self,
        rows: int = 1,
        block: Callable[[ContextScope], Any] | None = None,
    ) -> ContextScope:
        """Group customizations for *rows* rows at the bottom of the table.

        The last declared group takes the last rows. Bottom groups take
        precedence over top groups when their spans overlap.
        """
        scope = ContextScope(self, self._contexts.add_bottom(rows))
        if block is not None:
            block(scope)
        return scope

    def _target(self, context: TableContext | ContextScope | None) -> TableContext:
        if context is None:
            return self._contexts.default
        if isinstance(context, ContextScope):
            return context.context
        return context

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> str:
        """Return the colorized and formatted table."""
        header_output = self._build_header_output()
        data_output = self._build_data_output()
        table_data = header_output + data_output
        if self._layout == "vertical":
            # rows may differ in size, so missing cells become blanks
            table_data = transpose(table_data)
        logger.debug(
            "rendering %d data rows as %d physical rows (%s)",
            len(self._data),
            len(header_output) + len(data_output),
            self._layout,
        )

        parts: list[str] = []
        if self.title:
            parts.append(self._paint(self.title, self._style.title) + "\n")
        if self.description:
            parts.append(self._paint(self.description, self._style.description) + "\n")
        parts.append(self._content(table_data))
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def print(self, to: IO[str] | None = None) -> None:
        """Write the rendered table to *to* (standard output by default)."""
        (to or sys.stdout).write(self.render())

    def width(self) -> int:
        """Return the width of the widest rendered line, ignoring colors."""
        return max((visible_width(line) for line in split_lines(self.render())), default=0)

    def on_box(self, **params: Any) -> TextBox:
        """Return a :class:`TextBox` holding this table."""
        from yummi.text_box import TextBox

        box = TextBox(**params)
        box.add(self.render())
        return box

    def _paint(self, text: str, color: str | None) -> str:
        if not self._colors:
            return text
        return colorize(text, color)

    def _build_header_output(self) -> list[PhysicalRow]:
        if not self._header:
            return []
        return normalize_cells([Cell(text, self._style.header) for text in self._header])

    def _build_data_output(self) -> list[PhysicalRow]:
        output: list[PhysicalRow] = []
        row_contexts = self._contexts.row_contexts(len(self._data))
        columns = len(self._header) if self._header else None

        for row_index, row in enumerate(self._data):
            context = self._contexts[row_contexts[row_index]]
            values = extract_row(row, self._aliases, row_index)
            visible = values if columns is None else values[:columns]
            cells = [self._build_cell(context, value) for value in visible]

            if context.row_colorizer is not None:
                indexed = IndexedRow(self._aliases, [value.value for value in values])
                row_color = context.row_colorizer(row_index, indexed)
                if row_color is not None:
                    cells = [Cell(cell.value, row_color) for cell in cells]

            output.extend(normalize_cells(cells))
        return output

    def _build_cell(self, context: TableContext, column: CellValue) -> Cell:
        colorizer = context.colorizers.get(column.column_index)
        if context.null_colorizer is not None and column.is_null:
            color = context.null_colorizer(column.value)
        elif colorizer is not None:
            color = colorizer(column.value)
        else:
            color = self._style.value

        if column.is_null:
            formatter = context.null_formatter
        else:
            formatter = context.formatters.get(column.column_index)
        value = formatter(column.value) if formatter is not None else column.value
        return Cell(value, color)

    def _content(self, rows: list[PhysicalRow]) -> str:
        widths = column_widths(rows)
        gutter = " " * self.colspan
        lines: list[str] = []
        for row in rows:
            parts: list[str] = []
            for j, cell in enumerate(row):
                cell = cell or Cell(None)
                alignment = self._align.get(j, self._default_align)
                text = align_text(alignment, cell.text, widths[j])
                parts.append(self._paint(text, cell.color))
                parts.append(gutter)
            lines.append("".join(parts).rstrip() + "\n")
        return "".join(lines)


def _refs(indexes: int | str | Iterable[int | str]) -> list[int | str]:
    if isinstance(indexes, (int, str)):
        return [indexes]
    return list(indexes)
