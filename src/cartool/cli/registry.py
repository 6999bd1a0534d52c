"""
CLI: ``cartool registry``: generate, validate and inspect the property registry.
"""

from __future__ import annotations

import json
from pathlib import Path

import typer

from cartool.cli.utils import console, fail, print_table
from cartool.core.errors import ConfigError
from cartool.core.settings import get_settings
from cartool.registry import generate as generate_registry
from cartool.registry import load_registry
from cartool.registry.platform import load_platform_ids

app = typer.Typer(no_args_is_help=True)


@app.command("generate")
def generate(
    config: Path = typer.Argument(..., help="Property config YAML"),
    out: Path = typer.Option(Path("build"), "--out", "-o", help="Output directory for the artifact"),
) -> None:
    """Validate CONFIG and write the registry artifact."""
    settings = get_settings()
    try:
        artifact = generate_registry(config, out, load_platform_ids(settings.platform_ids_path))
    except ConfigError as e:
        raise fail(e) from e
    console.print(f"[green]Wrote[/green] {artifact}")


@app.command("validate")
def validate(
    config: Path = typer.Argument(..., help="Property config YAML or registry artifact"),
) -> None:
    """Check CONFIG against the registry rules."""
    settings = get_settings()
    try:
        registry = load_registry(config, settings.platform_ids_path)
    except ConfigError as e:
        raise fail(e) from e
    console.print(f"[green]Valid[/green]: {len(registry)} properties in {config.name}")


@app.command("show")
def show(
    config: Path | None = typer.Option(None, "--config", "-c", help="Config or artifact (default: settings)"),  # noqa: UP007
    as_json: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """List the allow-listed properties."""
    settings = get_settings()
    source = config or settings.registry_path or settings.config_path
    try:
        registry = load_registry(source, settings.platform_ids_path)
    except ConfigError as e:
        raise fail(e) from e

    if as_json:
        typer.echo(json.dumps(registry.to_dict(), indent=2))
        return

    print_table(
        [{"name": p.name, "id": f"0x{p.id:08X}", "description": p.description} for p in registry],
        title=f"Registry ({source})",
    )
