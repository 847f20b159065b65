"""Terminal text utilities: ANSI stripping, width measurement, alignment.

Widths are plain character counts once escape sequences are removed; wide
characters and grapheme clusters are not measured specially.
"""

from __future__ import annotations

import re
from typing import Callable

from yummi.exceptions import UnsupportedAlignmentError


# ---------------------------------------------------------------------------
# Regex patterns for ANSI sequences
# ---------------------------------------------------------------------------

_STRIP_RE = re.compile(
    r"\x1b\[[0-9;]*[mGKHJ]"        # CSI
    r"|\x1b\]8;;[^\x07]*\x07"       # OSC 8
)


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from *text*."""
    if not text:
        return ""
    return _STRIP_RE.sub("", text)


def visible_width(text: str) -> int:
    """Return the number of visible characters in *text*.

    Strips ANSI escape sequences and a trailing line terminator.
    """
    if not text:
        return 0
    return len(strip_ansi(text).rstrip("\r\n"))


# ---------------------------------------------------------------------------
# Alignment
# ---------------------------------------------------------------------------

def _pad(text: str, width: int) -> int:
    return max(0, width - visible_width(text))


def align_right(text: str, width: int) -> str:
    """Pad *text* on the left so it ends at column *width*."""
    return " " * _pad(text, width) + text


def align_left(text: str, width: int) -> str:
    """Pad *text* on the right up to column *width*."""
    return text + " " * _pad(text, width)


ALIGNERS: dict[str, Callable[[str, int], str]] = {
    "left": align_left,
    "right": align_right,
}


def check_alignment(alignment: str) -> str:
    """Return *alignment* if it names a known aligner, raise otherwise."""
    if alignment not in ALIGNERS:
        raise UnsupportedAlignmentError(alignment)
    return alignment


def align_text(alignment: str, text: str, width: int) -> str:
    """Align *text* to *width* using the named *alignment*."""
    return ALIGNERS[check_alignment(alignment)](text, width)


# ---------------------------------------------------------------------------
# Word wrapping
# ---------------------------------------------------------------------------

def wrap_words(text: str, width: int) -> list[str]:
    """Greedy word wrap of *text* to lines of at most *width* characters.

    Line breaks in *text* are treated as spaces. A single word longer than
    *width* is kept whole on its own line.
    """
    words = text.replace("\n", " ").split(" ")
    lines: list[str] = []
    buff = ""
    for word in words:
        if not word:
            continue
        if buff and visible_width(buff) + 1 + visible_width(word) > width:
            lines.append(buff)
            buff = ""
        buff = f"{buff} {word}" if buff else word
    if buff:
        lines.append(buff)
    return lines
