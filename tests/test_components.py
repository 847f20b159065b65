"""Tests for yummi.components -- tagged customization specs."""

from __future__ import annotations

import pytest

from yummi.components import (
    Block,
    Using,
    With,
    component_spec,
    printf,
    to_colorizer,
    to_formatter,
)


def _double(value):
    return value * 2


class TestComponentSpec:
    """Normalizing the ways a customization can be passed."""

    def test_using_keyword(self) -> None:
        assert component_spec(using=_double) == Using(_double)

    def test_with_keyword(self) -> None:
        assert component_spec(with_="red") == With("red")

    def test_bare_callable_is_block(self) -> None:
        assert component_spec(_double) == Block(_double)

    def test_tagged_spec_passes_through(self) -> None:
        assert component_spec(With("%.1f")) == With("%.1f")

    def test_using_wins_over_with(self) -> None:
        assert component_spec(using=_double, with_="red") == Using(_double)

    def test_plain_value_is_with(self) -> None:
        assert component_spec("green") == With("green")

    def test_nothing_given_raises(self) -> None:
        with pytest.raises(TypeError):
            component_spec()


class TestPrintf:
    def test_float_pattern(self) -> None:
        assert printf("%.2f", 1) == "1.00"

    def test_literal_text(self) -> None:
        assert printf("none", None) == "none"

    def test_escaped_percent_only(self) -> None:
        assert printf("100%%", 1) == "100%"

    def test_pattern_with_escaped_percent(self) -> None:
        assert printf("%d%%", 5) == "5%"


class TestToFormatterAndColorizer:
    def test_with_formatter_applies_pattern(self) -> None:
        assert to_formatter(With("%.2f"))(3) == "3.00"

    def test_using_formatter_is_the_function(self) -> None:
        assert to_formatter(Using(_double)) is _double

    def test_with_colorizer_is_constant(self) -> None:
        colorizer = to_colorizer(With("red"))
        assert colorizer(1) == "red"
        assert colorizer(0, ["row"]) == "red"

    def test_block_colorizer_is_the_function(self) -> None:
        assert to_colorizer(Block(_double)) is _double
