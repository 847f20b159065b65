"""Tagged customization specs for formatters and colorizers.

A customization is given either as ``Using(fn)`` (a callable used as-is),
``With(value)`` (a constant color, or a ``%`` pattern for formatters) or
as a bare callable, which is wrapped in ``Block``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Union

Formatter = Callable[[Any], Any]
Colorizer = Callable[[Any], "str | None"]
RowColorizer = Callable[[int, Any], "str | None"]


@dataclass(frozen=True)
class Using:
    fn: Callable[..., Any]


@dataclass(frozen=True)
class With:
    value: Any


@dataclass(frozen=True)
class Block:
    fn: Callable[..., Any]


ComponentSpec = Union[Using, With, Block]

# A printf conversion, ignoring escaped percent signs
_DIRECTIVE_RE = re.compile(r"%(?!%)")


def component_spec(
    spec: ComponentSpec | Callable[..., Any] | None = None,
    using: Callable[..., Any] | None = None,
    with_: Any = None,
) -> ComponentSpec:
    """Normalize the ways a customization can be passed into one tag.

    Precedence follows ``using``, then ``with_``, then *spec*.
    """
    if using is not None:
        return Using(using)
    if with_ is not None:
        return With(with_)
    if isinstance(spec, (Using, With, Block)):
        return spec
    if callable(spec):
        return Block(spec)
    if spec is not None:
        return With(spec)
    raise TypeError("a customization needs 'using', 'with_' or a callable")


def printf(pattern: str, value: Any) -> str:
    """Apply a ``%`` *pattern* to *value*.

    Patterns without a conversion are returned literally, so a null
    formatter can be given as plain text such as ``"none"``.
    """
    if _DIRECTIVE_RE.search(pattern.replace("%%", "")):
        return pattern % (value,)
    return pattern.replace("%%", "%")


def to_formatter(spec: ComponentSpec) -> Formatter:
    if isinstance(spec, With):
        pattern = str(spec.value)
        return lambda value: printf(pattern, value)
    return spec.fn


def to_colorizer(spec: ComponentSpec) -> Callable[..., str | None]:
    if isinstance(spec, With):
        color = spec.value
        return lambda *args: color
    return spec.fn
