"""Tests for yummi.config."""

from __future__ import annotations

import pytest

from yummi.config import DEFAULT_STYLE, TableStyle, colors_enabled_by_default


class TestTableStyle:
    def test_defaults(self) -> None:
        assert DEFAULT_STYLE.title == "intense_yellow"
        assert DEFAULT_STYLE.header == "intense_blue"
        assert DEFAULT_STYLE.value is None

    def test_merge_replaces_roles(self) -> None:
        style = DEFAULT_STYLE.merge({"title": "red", "color": "green", "other": "x"})
        assert style.title == "red"
        assert style.value == "green"
        assert style.header == DEFAULT_STYLE.header

    def test_merge_nothing(self) -> None:
        assert DEFAULT_STYLE.merge(None) is DEFAULT_STYLE

    def test_plain(self) -> None:
        assert TableStyle.plain() == TableStyle(None, None, None, None)


class TestColorsEnabled:
    def test_enabled_without_variable(self) -> None:
        assert colors_enabled_by_default() is True

    @pytest.mark.parametrize("value", ["1", "true", "yes"])
    def test_disabled_by_variable(self, monkeypatch, value: str) -> None:
        monkeypatch.setenv("YUMMI_NO_COLORS", value)
        assert colors_enabled_by_default() is False

    @pytest.mark.parametrize("value", ["0", "false", "NO", " off "])
    def test_false_values_keep_colors(self, monkeypatch, value: str) -> None:
        monkeypatch.setenv("YUMMI_NO_COLORS", value)
        assert colors_enabled_by_default() is True
