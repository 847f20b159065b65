"""Ready-made colorizers for columns and rows.

Column colorizers are called with the value; row colorizers with the row
index and an :class:`~yummi.rows.IndexedRow`. Both return a color name or
``None`` to fall back to the default color.
"""

from __future__ import annotations

from typing import Any, Callable


def join(*colorizers: Callable[..., str | None]) -> Callable[..., str | None]:
    """Combine colorizers; the first one that returns a color wins."""

    def colorizer(*args: Any) -> str | None:
        for component in colorizers:
            color = component(*args)
            if color is not None:
                return color
        return None

    return colorizer


class EvalColorizer:
    """Pick a color by testing a value derived from the arguments.

    ``fn`` receives the colorizer arguments and returns the value that each
    predicate registered with :meth:`use` is tested against, in order::

        by_total = EvalColorizer(lambda i, row: row["total"])
        by_total.use("red", lambda total: total < 0)
        by_total.use("green", lambda total: total > 0)
        table.colorize_row(by_total)
    """

    def __init__(self, fn: Callable[..., Any] | None = None) -> None:
        self._fn = fn or (lambda value: value)
        self._rules: list[tuple[str, Callable[[Any], bool]]] = []

    def use(self, color: str, predicate: Callable[[Any], bool]) -> EvalColorizer:
        self._rules.append((color, predicate))
        return self

    def __call__(self, *args: Any) -> str | None:
        value = self._fn(*args)
        for color, predicate in self._rules:
            if predicate(value):
                return color
        return None


def threshold(
    below: str | None,
    above: str | None,
    at: str | None = None,
    limit: float = 0,
) -> Callable[[Any], str | None]:
    """Color numbers below, above or equal to *limit*."""

    def colorizer(value: Any) -> str | None:
        if value < limit:
            return below
        if value > limit:
            return above
        return at

    return colorizer


# Row colorizers


def odd(color: str) -> Callable[[int, Any], str | None]:
    return lambda index, row: color if index % 2 == 1 else None


def even(color: str) -> Callable[[int, Any], str | None]:
    return lambda index, row: color if index % 2 == 0 else None


def zebra(first: str, second: str) -> Callable[[int, Any], str | None]:
    """Alternate two colors: *first* on odd rows, *second* on even rows."""
    return join(odd(first), even(second))
