"""
CLI: ``cartool property``: inspect the catalog against a simulated vehicle.
"""

from __future__ import annotations

from pathlib import Path

import typer

from cartool.cli.utils import fail
from cartool.core.errors import CarToolError
from cartool.core.settings import get_settings
from cartool.property.repository import CarPropertyRepository
from cartool.property.simulator import InMemoryVehiclePropertyService
from cartool.registry import load_registry
from cartool.registry.platform import load_platform_ids

app = typer.Typer(no_args_is_help=True)


@app.command("list")
def list_properties(
    fixture: Path = typer.Option(..., "--fixture", "-f", help="Simulator fixture YAML"),
    config: Path | None = typer.Option(None, "--config", "-c", help="Config or artifact (default: settings)"),  # noqa: UP007
) -> None:
    """Print the property catalog JSON for the simulated vehicle in FIXTURE."""
    settings = get_settings()
    try:
        registry = load_registry(
            config or settings.registry_path or settings.config_path,
            settings.platform_ids_path,
        )
        service = InMemoryVehiclePropertyService.from_yaml(fixture, load_platform_ids(settings.platform_ids_path))
        catalog = CarPropertyRepository(service, registry).get_property_list()
    except CarToolError as e:
        raise fail(e) from e
    typer.echo(catalog)
