"""Process-wide registry: load once at startup, read-only afterwards.

::

    load_registry(path)     → PropertyRegistry from artifact (.json) or config (.yaml)
    get_registry()          → lazily built from settings, cached for the process
    set_registry(registry)  → install an explicitly loaded registry
    clear_registry()        → reset (for testing)
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from cartool.core.errors import ConfigFileNotFoundError, RegistryConfigError
from cartool.core.logging import get_logger
from cartool.core.settings import get_settings
from cartool.registry.generator import build_registry
from cartool.registry.models import Property, PropertyRegistry, RegistryArtifact
from cartool.registry.platform import load_platform_ids

logger = get_logger(__name__)

_registry: PropertyRegistry | None = None


def load_registry(path: str | Path, platform_ids_path: str | Path | None = None) -> PropertyRegistry:
    """
    Load a registry from a generated artifact or directly from a YAML config.

    A ``.json`` path is read as an artifact written by ``generate()``; any
    other path is validated as a property config with the generator rules.
    """
    path = Path(path)
    if path.suffix != ".json":
        return build_registry(path, load_platform_ids(platform_ids_path))

    if not path.exists():
        raise ConfigFileNotFoundError(str(path))

    try:
        artifact = RegistryArtifact.model_validate(json.loads(path.read_text(encoding="utf-8")))
    except (json.JSONDecodeError, ValidationError) as e:
        raise RegistryConfigError(f"Invalid registry artifact {path.name}: {e}", cause=e) from e

    registry = PropertyRegistry(
        (Property(name=entry.name, description=entry.description, id=entry.id) for entry in artifact.properties),
        source=str(path),
    )
    logger.info("registry_loaded", source=path.name, properties=len(registry))
    return registry


def get_registry() -> PropertyRegistry:
    """Return the process-wide registry, building it from settings on first use."""
    global _registry
    if _registry is None:
        settings = get_settings()
        source = settings.registry_path or settings.config_path
        _registry = load_registry(source, settings.platform_ids_path)
    return _registry


def set_registry(registry: PropertyRegistry) -> None:
    global _registry
    _registry = registry
    logger.debug("registry_installed", properties=len(registry), source=registry.source)


def clear_registry() -> None:
    """Clear the cached registry (useful for testing)."""
    global _registry
    _registry = None


__all__ = ["clear_registry", "get_registry", "load_registry", "set_registry"]
