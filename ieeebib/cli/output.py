"""CLI output utilities."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text


def print_text(console: Console, text: str) -> None:
    """Print text verbatim on a single logical line.

    Args:
        console: Target console
        text: Text to print
    """
    console.print(text, markup=False, emoji=False, highlight=False, soft_wrap=True)


def print_warning(console: Console, message: str) -> None:
    """Print warning message.

    Args:
        console: Target console
        message: Warning message
    """
    console.print(f"[yellow]Warning:[/yellow] {escape(message)}", soft_wrap=True)


def print_success(console: Console, message: str) -> None:
    """Print success message.

    Args:
        console: Target console
        message: Success message
    """
    console.print(f"[green]✓[/green] {escape(message)}", soft_wrap=True)


def print_table(
    console: Console,
    headers: list[str],
    rows: list[list[str]],
    title: str | None = None,
) -> None:
    """Print a table.

    Args:
        console: Target console
        headers: Table headers
        rows: Table rows
        title: Optional table title
    """
    table = Table(title=title) if title else Table()

    for header in headers:
        table.add_column(header)

    for row in rows:
        table.add_row(*[Text(str(cell)) for cell in row])

    console.print(table)


def read_text(path: Path) -> str:
    """Read a UTF-8 input file, reporting failures as Click errors."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise click.FileError(str(path), hint=str(e))
