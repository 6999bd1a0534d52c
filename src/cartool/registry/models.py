"""Registry entities: the config-side definition and the resident registry.

ARCHITECTURE
────────────
::

    PropertyDefinition   ── one validated config entry (build time only)
    Property             ── frozen registry entry (name, description, id)
    PropertyRegistry     ── immutable id → Property / name → id lookup

The registry is built once per process and never mutated afterwards; its
mappings are exposed as ``MappingProxyType`` views.

Tags:
    registry, vehicle-property, immutable, cartool

Doc-Types:
    api-reference
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from cartool.core.errors import RegistryConfigError


class PropertyDefinition(BaseModel):
    """A property entry from the YAML config, after rule checks."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    id: StrictInt | None = None


class ArtifactEntry(PropertyDefinition):
    """A resolved entry of the generated registry artifact."""

    id: StrictInt


class RegistryArtifact(BaseModel):
    """The JSON artifact written by ``generate()``."""

    model_config = ConfigDict(extra="ignore")

    properties: list[ArtifactEntry]


@dataclass(frozen=True)
class Property:
    """An allow-listed vehicle property."""

    name: str
    description: str
    id: int

    def to_dict(self) -> dict[str, str | int]:
        return {"name": self.name, "description": self.description, "id": self.id}


class PropertyRegistry:
    """Immutable name ↔ id lookup over allow-listed properties.

    Iteration yields properties in the order they were declared.

    Raises:
        RegistryConfigError: If two properties share a name or an id
    """

    def __init__(self, properties: Iterable[Property], *, source: str | None = None):
        by_id: dict[int, Property] = {}
        by_name: dict[str, int] = {}
        for prop in properties:
            if prop.name in by_name:
                raise RegistryConfigError(f"Property name {prop.name} is registered more than once.")
            if prop.id in by_id:
                raise RegistryConfigError(
                    f"Properties {by_id[prop.id].name} and {prop.name} resolve to the same id {prop.id}."
                )
            by_id[prop.id] = prop
            by_name[prop.name] = prop.id

        self.source = source
        self._by_id: Mapping[int, Property] = MappingProxyType(by_id)
        self._by_name: Mapping[str, int] = MappingProxyType(by_name)

    @property
    def by_id(self) -> Mapping[int, Property]:
        return self._by_id

    @property
    def by_name(self) -> Mapping[str, int]:
        return self._by_name

    @property
    def ids(self) -> list[int]:
        return list(self._by_id)

    def get(self, property_id: int) -> Property | None:
        return self._by_id.get(property_id)

    def id_for(self, name: str) -> int | None:
        return self._by_name.get(name)

    def to_dict(self) -> dict[str, list[dict[str, str | int]]]:
        return {"properties": [prop.to_dict() for prop in self]}

    def __iter__(self) -> Iterator[Property]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, property_id: object) -> bool:
        return property_id in self._by_id

    def __repr__(self) -> str:
        return f"PropertyRegistry({len(self)} properties, source={self.source!r})"


__all__ = ["ArtifactEntry", "Property", "PropertyDefinition", "PropertyRegistry", "RegistryArtifact"]
