"""ANSI color lookup and colorizing helpers.

Colors follow the default Linux terminal scheme. Any name in ``COLORS`` can
be used, as well as ``<type>_<n>`` names (``intense_2``, ``blink_5``) where
``n`` picks one of the eight base colors starting at 1.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# Colors from the default linux terminal scheme
COLORS: dict[str, str] = {
    "nothing": "0;0",

    "black": "0;30",
    "red": "0;31",
    "green": "0;32",
    "brown": "0;33",
    "blue": "0;34",
    "purple": "0;35",
    "cyan": "0;36",
    "gray": "0;37",

    "black_underscored": "4;30",
    "red_underscored": "4;31",
    "green_underscored": "4;32",
    "brown_underscored": "4;33",
    "blue_underscored": "4;34",
    "purple_underscored": "4;35",
    "cyan_underscored": "4;36",
    "gray_underscored": "4;37",

    "blink_black": "5;30",
    "blink_red": "5;31",
    "blink_green": "5;32",
    "blink_brown": "5;33",
    "blink_blue": "5;34",
    "blink_purple": "5;35",
    "blink_cyan": "5;36",
    "blink_gray": "5;37",

    "highlight_black": "7;30",
    "highlight_red": "7;31",
    "highlight_green": "7;32",
    "highlight_brown": "7;33",
    "highlight_blue": "7;34",
    "highlight_purple": "7;35",
    "highlight_cyan": "7;36",
    "highlight_gray": "7;37",

    "intense_gray": "1;30",
    "intense_red": "1;31",
    "intense_green": "1;32",
    "intense_yellow": "1;33",
    "yellow": "1;33",
    "intense_blue": "1;34",
    "intense_purple": "1;35",
    "intense_cyan": "1;36",
    "intense_white": "1;37",
    "white": "1;37",
}

# Types of color
TYPES: dict[str, int] = {
    "normal": 0,
    "intense": 1,
    "underscored": 4,
    "blink": 5,
    "highlight": 7,
}

RESET = "\x1b[0;0m"


def parse(name: str) -> str:
    """Parse a ``<type>_<n>`` color name into an SGR code like ``1;31``."""
    kind, sep, number = str(name).partition("_")
    if not sep or kind not in TYPES or not number.isdigit():
        raise ValueError(f"Unknown color {name!r}")
    index = int(number)
    if not 1 <= index <= 8:
        raise ValueError(f"Unknown color {name!r}")
    return f"{TYPES[kind]};3{index - 1}"


def code(name: str) -> str:
    """Return the SGR code for a color *name*."""
    return COLORS.get(str(name)) or parse(name)


def escape(name: str | None) -> str | None:
    """Return the escape sequence that switches to color *name*.

    Unknown names give ``None`` so the text is printed without color.
    """
    if name is None:
        return None
    try:
        return f"\x1b[{code(name)}m"
    except ValueError:
        logger.warning("Unknown color %r, printing without color", name)
        return None


def colorize(text: str, color: str | None) -> str:
    """Wrap *text* with the escape for *color*, or return it unchanged."""
    start = escape(color)
    if start is None:
        return text
    return f"{start}{text}{RESET}"
