"""
CLI utility helpers: output formatting and error exits.
"""

from __future__ import annotations

from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from cartool.core.errors import CarToolError

console = Console()
err_console = Console(stderr=True, soft_wrap=True)


def fail(error: CarToolError) -> typer.Exit:
    """Print ``error`` and return the exit to raise."""
    err_console.print(f"[bold red]Error[/bold red]: {escape(error.message)}")
    return typer.Exit(code=1)


def print_table(rows: list[dict[str, Any]], *, title: str = "") -> None:
    """Render a list of dicts as a Rich table."""
    if not rows:
        console.print("[dim]No items.[/dim]")
        return
    table = Table(title=title or None, show_lines=False, pad_edge=False)
    for col in rows[0]:
        table.add_column(col, overflow="fold")
    for row in rows:
        table.add_row(*(str(v) for v in row.values()))
    console.print(table)
