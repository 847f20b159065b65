"""TextBox component - draws a border around lines of text."""

from __future__ import annotations

import sys
from typing import IO, Any

from yummi.cells import split_lines
from yummi.color import colorize
from yummi.config import DEFAULT_BOX_COLOR, colors_enabled_by_default
from yummi.utils import align_text, check_alignment, visible_width, wrap_words


class TextBox:
    """A box to decorate texts.

    Lines keep their own colors; the border is sized to the widest visible
    line::

        +-----------+
        |Cash Flow  |
        |  a   1.00 |
        +-----------+
    """

    def __init__(
        self,
        color: str | None = DEFAULT_BOX_COLOR,
        content: Any = "",
        max_width: int | None = None,
        default_align: str | None = None,
    ) -> None:
        self.color = color
        self.content = str(content)
        self.max_width = max_width
        self.default_align = check_alignment(default_align) if default_align else None
        self._colors = colors_enabled_by_default()

    def no_colors(self) -> None:
        self._colors = False

    def add(
        self,
        text: Any,
        color: str | None = None,
        width: int | None = None,
        align: str | None = None,
    ) -> TextBox:
        """Add text to this box, one line per line of *text*.

        With a *width* (or ``max_width``) the text is word-wrapped to it and,
        when an alignment is given too, each line is aligned to that width.
        Anything that is not a string is added as ``str(text)``, so a
        :class:`~yummi.table.Table` can be added directly.
        """
        text = str(text)
        width = width if width is not None else self.max_width
        align = align or self.default_align
        if width:
            lines = wrap_words(text, width)
        else:
            lines = split_lines(text) if text else []
        for line in lines:
            self._add(line, color, width, align)
        return self

    __lshift__ = add

    def line_break(self) -> None:
        self.content += "\n"

    def render(self) -> str:
        lines = split_lines(self.content) if self.content else []
        width = max((visible_width(line) for line in lines), default=0)

        border = self._paint("+" + "-" * width + "+") + "\n"
        pipe = self._paint("|")
        parts = [border]
        for line in lines:
            padding = " " * (width - visible_width(line))
            parts.append(f"{pipe}{line}{padding}{pipe}\n")
        parts.append(border)
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def print(self, to: IO[str] | None = None) -> None:
        (to or sys.stdout).write(self.render())

    def _paint(self, text: str, color: str | None = None) -> str:
        if not self._colors:
            return text
        return colorize(text, color if color is not None else self.color)

    def _add(self, text: str, color: str | None, width: int | None, align: str | None) -> None:
        if align and width:
            text = align_text(align, text, width)
        if color is not None:
            text = self._paint(text, color)
        self.content += text
        self.line_break()
