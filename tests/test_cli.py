"""Tests for the yummi CLI."""

from __future__ import annotations

from click.testing import CliRunner

from yummi.cli import build_cash_flow_table, main

PLAIN = {"YUMMI_NO_COLORS": "1"}


class TestCashFlow:
    def test_plain_output(self) -> None:
        result = CliRunner().invoke(main, ["cash-flow", "--color", "none"])
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == "Cash Flow"
        assert "Authentication" in lines[1]
        assert lines[3].startswith("Initial")
        assert lines[3].endswith("none")
        assert "\x1b" not in result.output

    def test_values_are_formatted(self) -> None:
        output = build_cash_flow_table("none").render()
        assert "50.23" in output
        assert "-49.65" in output
        assert "Yes" in output

    def test_full_colors(self) -> None:
        result = CliRunner().invoke(main, ["cash-flow", "--color", "full"])
        assert result.exit_code == 0, result.output
        assert "\x1b[0;35m" in result.output

    def test_vertical_layout(self) -> None:
        result = CliRunner().invoke(main, ["cash-flow", "--layout", "vertical"], env=PLAIN)
        assert result.exit_code == 0, result.output
        assert result.output.splitlines()[1].startswith("Description")

    def test_box(self) -> None:
        result = CliRunner().invoke(main, ["cash-flow", "--box"], env=PLAIN)
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0].startswith("+-")
        assert lines[1].startswith("|Cash Flow")

    def test_invalid_color(self) -> None:
        result = CliRunner().invoke(main, ["cash-flow", "--color", "rainbow"])
        assert result.exit_code != 0


class TestListFiles:
    def test_lists_directory(self, tmp_path) -> None:
        (tmp_path / "data.bin").write_bytes(b"x" * 2048)
        (tmp_path / "sub").mkdir()
        result = CliRunner().invoke(main, ["ls", "--basedir", str(tmp_path)], env=PLAIN)
        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[1].split() == ["Name", "Size", "Directory"]
        assert lines[2].split() == ["data.bin", "2.0", "KB", "No"]
        assert lines[3].split()[0] == "sub"
        assert lines[3].split()[-1] == "Yes"


class TestMain:
    def test_help_without_command(self) -> None:
        result = CliRunner().invoke(main, [])
        assert result.exit_code == 0
        assert "cash-flow" in result.output
