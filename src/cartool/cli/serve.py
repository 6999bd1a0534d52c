"""
CLI: ``cartool serve``: start the MCP server.
"""

from __future__ import annotations

from pathlib import Path

import typer

from cartool.cli.utils import fail
from cartool.core.errors import ConfigError


def serve(
    fixture: Path | None = typer.Option(None, "--fixture", "-f", help="Simulator fixture YAML"),  # noqa: UP007
    transport: str = typer.Option("stdio", "--transport", "-t", help="stdio or http"),
    port: int | None = typer.Option(None, "--port", "-p", help="HTTP port (default: settings)"),  # noqa: UP007
) -> None:
    """Start the cartool MCP server."""
    from cartool.mcp.server import run

    try:
        run(fixture, transport=transport, port=port)
    except ConfigError as e:
        raise fail(e) from e
