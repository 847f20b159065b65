"""Tests for yummi.color -- color lookup and escaping."""

from __future__ import annotations

import pytest

from yummi.color import COLORS, RESET, colorize, escape, parse


class TestEscape:
    def test_named_color(self) -> None:
        assert escape("red") == "\x1b[0;31m"

    def test_none_gives_none(self) -> None:
        assert escape(None) is None

    def test_parsed_color(self) -> None:
        assert escape("blink_8") == "\x1b[5;37m"

    def test_yellow_is_intense_yellow(self) -> None:
        assert COLORS["yellow"] == COLORS["intense_yellow"]


class TestParse:
    def test_type_and_index(self) -> None:
        assert parse("intense_2") == "1;31"

    def test_normal_first_color(self) -> None:
        assert parse("normal_1") == "0;30"

    @pytest.mark.parametrize("name", ["bogus", "intense_9", "shiny_1", "intense_x"])
    def test_unknown_names_raise(self, name: str) -> None:
        with pytest.raises(ValueError):
            parse(name)


class TestUnknownColors:
    @pytest.mark.parametrize("name", ["magenta", "bold.yellow", "intense_9"])
    def test_escape_gives_none(self, name: str) -> None:
        assert escape(name) is None

    def test_colorize_leaves_text_plain(self, caplog) -> None:
        with caplog.at_level("WARNING", logger="yummi.color"):
            assert colorize("x", "magenta") == "x"
        assert "magenta" in caplog.text


class TestColorize:
    def test_wraps_text(self) -> None:
        assert colorize("x", "red") == "\x1b[0;31mx" + RESET

    def test_reset_sequence(self) -> None:
        assert RESET == "\x1b[0;0m"

    def test_no_color_returns_text(self) -> None:
        assert colorize("x", None) == "x"
