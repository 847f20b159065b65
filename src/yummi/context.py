"""Row contexts: groups of customizations applied to a span of rows.

The default context (id 0) applies to every row not claimed by a top or
bottom group. Top groups claim rows from the start of the data in
declaration order; bottom groups claim rows from the end, the last
declared one taking the last rows. When the spans overlap the bottom
groups win, since they are assigned last.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from yummi.table import Table

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT = 0


@dataclass
class TableContext:
    """Customizations registered for one group of rows."""

    id: int
    rows: int = 0
    formatters: dict[int, Callable[[Any], Any]] = field(default_factory=dict)
    colorizers: dict[int, Callable[[Any], str | None]] = field(default_factory=dict)
    row_colorizer: Callable[[int, Any], str | None] | None = None
    null_formatter: Callable[[Any], Any] | None = None
    null_colorizer: Callable[[Any], str | None] | None = None


class ContextRegistry:
    """Holds the default context and the declared top/bottom groups."""

    def __init__(self) -> None:
        self._contexts: dict[int, TableContext] = {
            DEFAULT_CONTEXT: TableContext(DEFAULT_CONTEXT),
        }
        self._top: list[TableContext] = []
        self._bottom: list[TableContext] = []

    @property
    def default(self) -> TableContext:
        return self._contexts[DEFAULT_CONTEXT]

    def __getitem__(self, context_id: int) -> TableContext:
        return self._contexts[context_id]

    def __len__(self) -> int:
        return len(self._contexts)

    def _create(self, rows: int) -> TableContext:
        context = TableContext(len(self._contexts), rows=max(0, int(rows)))
        self._contexts[context.id] = context
        return context

    def add_top(self, rows: int = 1) -> TableContext:
        context = self._create(rows)
        self._top.append(context)
        logger.debug("top context %d claims %d rows", context.id, context.rows)
        return context

    def add_bottom(self, rows: int = 1) -> TableContext:
        context = self._create(rows)
        self._bottom.append(context)
        logger.debug("bottom context %d claims %d rows", context.id, context.rows)
        return context

    def row_contexts(self, total: int) -> list[int]:
        """Map each of *total* row indexes to the id of its context."""
        mapping = [DEFAULT_CONTEXT] * total

        offset = 0
        for context in self._top:
            end = min(offset + context.rows, total)
            for i in range(offset, end):
                mapping[i] = context.id
            offset = end

        remaining = total
        for context in reversed(self._bottom):
            start = max(remaining - context.rows, 0)
            for i in range(start, remaining):
                mapping[i] = context.id
            remaining = start

        return mapping


class ContextScope:
    """Handle for registering customizations against one context.

    Returned by :meth:`Table.top` and :meth:`Table.bottom`. It can be used
    directly, handed to a block, or entered as a ``with`` block::

        with table.bottom(rows=1) as total:
            total.colorize("total", with_="white")
    """

    def __init__(self, table: Table, context: TableContext) -> None:
        self._table = table
        self.context = context

    def __enter__(self) -> ContextScope:
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None

    def format(self, indexes, spec=None, *, using=None, with_=None) -> None:
        self._table.format(indexes, spec, using=using, with_=with_, context=self.context)

    def format_null(self, spec=None, *, using=None, with_=None) -> None:
        self._table.format_null(spec, using=using, with_=with_, context=self.context)

    def colorize(self, indexes, spec=None, *, using=None, with_=None) -> None:
        self._table.colorize(indexes, spec, using=using, with_=with_, context=self.context)

    def colorize_null(self, spec=None, *, using=None, with_=None) -> None:
        self._table.colorize_null(spec, using=using, with_=with_, context=self.context)

    def colorize_row(self, spec=None, *, using=None, with_=None) -> None:
        self._table.colorize_row(spec, using=using, with_=with_, context=self.context)
