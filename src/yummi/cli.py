"""CLI entry point for yummi. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import os
from pathlib import Path

import click

from yummi import colorizers, formatters
from yummi.table import Table

CASH_FLOW_DATA = [
    ["Initial", 0, 0, False, None],
    ["Deposit", 100.58, 100.58, True, "QAWSEDRFTGH535"],
    ["Withdraw", -50.23, 50.35, True, "34ERDTF6GYU"],
    ["Withdraw", -100, -49.65, True, "2344EDRFT5"],
    ["Deposit", 50, 0.35, False, None],
    ["Deposit", 600, 600.35, False, None],
]


def _emit(table: Table, box: bool) -> None:
    if box:
        table.on_box().print()
    else:
        table.print()


@click.group(invoke_without_command=True)
@click.option(
    "--log-level",
    type=click.Choice(["debug", "info", "warning", "error"]),
    default="warning",
    help="Logging level",
)
@click.pass_context
def main(ctx, log_level):
    """Print tables with aligned, formatted and colorized values."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def build_cash_flow_table(color: str | None = None, layout: str | None = None) -> Table:
    table = Table(title="Cash Flow")
    # setting the header sets the aliases automatically
    table.header = ["Description", "Value", "Total", "Eletronic", "Authentication\nCode"]
    table.align("description", "left")
    table.format("eletronic", using=formatters.yes_or_no())
    # values without minus signal
    table.format("value", using=lambda value: "%.2f" % abs(value))
    table.format("total", using=formatters.round_to(2))
    table.format_null(with_="none")
    table.data = CASH_FLOW_DATA

    if color == "zebra":
        table.colorize_row(colorizers.zebra("brown", "purple"))
    elif color == "full":
        table.colorize("description", with_="purple")
        table.colorize("authentication_code", with_="highlight_gray")
        table.colorize("eletronic", lambda value: "blue" if value else "cyan")
        table.colorize(["value", "total"], colorizers.threshold("red", "green", at="brown"))
        table.colorize_row(lambda i, row: "white" if row["value"] > row["total"] else None)
        table.colorize_null(with_="red")
    elif color == "none":
        table.no_colors()

    if layout:
        table.layout = layout
    return table


@main.command("cash-flow")
@click.option("--color", type=click.Choice(["zebra", "full", "none"]), default=None,
              help="Color type")
@click.option("--layout", type=click.Choice(["horizontal", "vertical"]), default=None,
              help="Table layout")
@click.option("--box", is_flag=True, help="Print the table inside a box")
def cash_flow(color, layout, box):
    """Print a sample cash flow table."""
    _emit(build_cash_flow_table(color, layout), box)


def build_files_table(basedir: Path) -> Table:
    table = Table(title=f"Files in {basedir}")
    table.header = ["Name", "Size", "Directory"]
    table.align("name", "left")
    table.format("directory", using=formatters.yes_or_no())
    table.format("size", using=formatters.bytes_unit())
    table.colorize_row(colorizers.zebra("intense_gray", "intense_white"))
    for entry in sorted(basedir.iterdir()):
        table << [entry.name, entry.stat().st_size, entry.is_dir()]
    return table


@main.command("ls")
@click.option("--basedir", type=click.Path(exists=True, file_okay=False, path_type=Path),
              default=None, help="Directory to list (default: home folder)")
@click.option("--box", is_flag=True, help="Print the table inside a box")
def list_files(basedir, box):
    """List the files of a directory with their sizes."""
    basedir = basedir or Path(os.path.expanduser("~"))
    _emit(build_files_table(basedir), box)


if __name__ == "__main__":
    main()
