"""
Root Typer application for the cartool CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

from cartool.cli.utils import fail
from cartool.core.errors import ConfigError
from cartool.core.logging import configure_logging
from cartool.core.settings import get_settings

app = Typer(
    name="cartool",
    help="cartool: vehicle property catalog and typed access for agents.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from cartool import __version__

        typer.echo(f"cartool {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """cartool CLI: build the property registry, inspect the catalog, serve MCP."""
    settings = get_settings()
    try:
        configure_logging(level=settings.log_level, json_format=settings.json_logs)
    except ConfigError as e:
        raise fail(e) from e


# ── Sub-command registration ─────────────────────────────────────────────

from cartool.cli.property import app as property_app  # noqa: E402
from cartool.cli.registry import app as registry_app  # noqa: E402
from cartool.cli.serve import serve  # noqa: E402

app.add_typer(registry_app, name="registry", help="Property registry generation and inspection.")
app.add_typer(property_app, name="property", help="Property catalog against a simulated vehicle.")
app.command("serve")(serve)
