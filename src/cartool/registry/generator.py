"""Registry generator: property config YAML → validated registry → JSON artifact.

Manifesto:
The allow-list of properties an agent may touch is a build artifact, not
runtime input. Every rule that makes the registry safe (unique names,
unique ids, no hand-written ids in the system-owned range, a description
for every property) is checked here, once, with an exact message that
points at the offending entry. A registry that fails any rule is never
produced.

ARCHITECTURE
────────────
::

    vehicle_properties.yaml
        │  read_config()           ConfigFileNotFoundError / missing 'properties'
        ▼
    raw entries
        │  parse_config()          names → duplicate names → duplicate ids
        │                          → system ids → descriptions
        ▼
    PropertyDefinition[]
        │  build_registry()        symbolic ids resolved via platform table
        ▼
    PropertyRegistry
        │  generate()
        ▼
    <out_dir>/vehicle_property_config.json

Config format::

    properties:
      - name: INFO_VIN                 # platform property, id resolved by name
        description: Vehicle identification number.
      - name: CUSTOM_PROPERTY          # vendor property, explicit id
        id: 591397123
        description: A vendor extension.

Tags:
    registry, generator, yaml, validation, build-time, cartool

Doc-Types:
    api-reference, how-to
"""

from __future__ import annotations

import json
from collections import Counter
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from cartool.core.errors import ConfigFileNotFoundError, RegistryConfigError
from cartool.core.logging import get_logger
from cartool.registry.models import Property, PropertyDefinition, PropertyRegistry
from cartool.registry.platform import is_system_property_id, load_platform_ids

logger = get_logger(__name__)

ARTIFACT_FILENAME = "vehicle_property_config.json"

KEY_PROPERTIES = "properties"
KEY_NAME = "name"
KEY_ID = "id"
KEY_DESCRIPTION = "description"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def read_config(path: str | Path) -> list[Any]:
    """Read the raw ``properties`` list from a YAML config file."""
    path = Path(path)
    if not path.exists():
        raise ConfigFileNotFoundError(str(path))

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise RegistryConfigError(f"Invalid YAML in {path.name}: {e}", cause=e) from e

    if not isinstance(data, dict) or not isinstance(data.get(KEY_PROPERTIES), list):
        raise RegistryConfigError(
            "YAML must contain a top-level key 'properties' with a list of properties."
        ).with_context(config_file=str(path))

    return data[KEY_PROPERTIES]


def parse_config(path: str | Path) -> list[PropertyDefinition]:
    """
    Read and validate a property config.

    Rules are checked in a fixed order and the first violated rule wins,
    so a config with several problems always reports the same one.

    Raises:
        ConfigFileNotFoundError: The file does not exist
        RegistryConfigError: Any other rule violation
    """
    path = Path(path)
    entries = read_config(path)
    file_name = path.name

    names: list[str] = []
    for entry in entries:
        name = entry.get(KEY_NAME) if isinstance(entry, dict) else None
        if not isinstance(name, str) or not name:
            raise RegistryConfigError(
                "A property is missing the required 'name' key."
            ).with_context(config_file=str(path))
        names.append(name)

    duplicate_names = [name for name, count in Counter(names).items() if count > 1]
    if duplicate_names:
        raise RegistryConfigError(
            f"The same property name is declared multiple times in {file_name}: "
            f"{', '.join(duplicate_names)}"
        ).with_context(config_file=str(path))

    explicit_ids = [entry[KEY_ID] for entry in entries if _is_int(entry.get(KEY_ID))]
    duplicate_ids = [str(pid) for pid, count in Counter(explicit_ids).items() if count > 1]
    if duplicate_ids:
        raise RegistryConfigError(
            f"The same property id is declared multiple times in {file_name}: "
            f"{', '.join(duplicate_ids)}"
        ).with_context(config_file=str(path))

    for property_id in explicit_ids:
        if is_system_property_id(property_id):
            raise RegistryConfigError(
                f"An ID was provided for system property {property_id}. Use the name only."
            ).with_context(config_file=str(path), property_id=property_id)

    definitions: list[PropertyDefinition] = []
    for entry in entries:
        name = entry[KEY_NAME]
        description = entry.get(KEY_DESCRIPTION)
        if not isinstance(description, str) or not description.strip():
            raise RegistryConfigError(
                f"A description is missing for property {name}."
            ).with_context(config_file=str(path), property_name=name)
        try:
            definitions.append(PropertyDefinition.model_validate(entry))
        except ValidationError as e:
            raise RegistryConfigError(
                f"Invalid definition for property {name} in {file_name}: {e}", cause=e
            ).with_context(config_file=str(path), property_name=name) from e

    return definitions


def resolve_property_id(definition: PropertyDefinition, platform_ids: Mapping[str, int]) -> int:
    """Return the explicit id, or look the name up in the platform table."""
    if definition.id is not None:
        return definition.id
    property_id = platform_ids.get(definition.name)
    if property_id is None:
        raise RegistryConfigError(
            f"Unknown system property {definition.name}. "
            "Provide an explicit id for vendor properties."
        ).with_context(property_name=definition.name)
    return property_id


def build_registry(
    path: str | Path,
    platform_ids: Mapping[str, int] | None = None,
) -> PropertyRegistry:
    """Validate a config file and build the registry it describes."""
    path = Path(path)
    definitions = parse_config(path)
    if platform_ids is None:
        platform_ids = load_platform_ids()

    registry = PropertyRegistry(
        (
            Property(
                name=definition.name,
                description=definition.description,
                id=resolve_property_id(definition, platform_ids),
            )
            for definition in definitions
        ),
        source=str(path),
    )

    logger.info(
        "registry_built",
        source=path.name,
        properties=len(registry),
        symbolic=sum(1 for d in definitions if d.id is None),
    )
    return registry


def generate(
    input_path: str | Path,
    out_dir: str | Path,
    platform_ids: Mapping[str, int] | None = None,
) -> Path:
    """
    Validate ``input_path`` and write the registry artifact into ``out_dir``.

    Returns:
        Path of the written ``vehicle_property_config.json``
    """
    registry = build_registry(input_path, platform_ids)

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    artifact = out_dir / ARTIFACT_FILENAME
    artifact.write_text(json.dumps(registry.to_dict(), indent=2) + "\n", encoding="utf-8")

    logger.info("registry_generated", artifact=str(artifact), properties=len(registry))
    return artifact


__all__ = [
    "ARTIFACT_FILENAME",
    "build_registry",
    "generate",
    "parse_config",
    "read_config",
    "resolve_property_id",
]
