"""In-memory vehicle property service, loaded from a YAML fixture.

Used to run the MCP server and the CLI without a vehicle. Fixture format::

    properties:
      - id: 0x11100100            # or name: INFO_VIN (resolved via the platform table)
        access: 1
        change_mode: 0
        area_type: 0
        value_kind: string
        areas:
          - area_id: 0
            value: "1HGCM82633A004352"
            available: true       # optional, default true
            min: 0                # optional
            max: 100              # optional
            enum_values: [1, 2]   # optional

Values written through ``set_*_property`` are kept and returned by later
reads; nothing is persisted.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from cartool.core.errors import ConfigError, ConfigFileNotFoundError
from cartool.core.logging import get_logger
from cartool.property.descriptors import AreaIdConfig, RawPropertyDescriptor
from cartool.registry.platform import load_platform_ids

logger = get_logger(__name__)


class SimulatedArea(BaseModel):
    model_config = ConfigDict(extra="forbid")

    area_id: int = 0
    value: Any = None
    available: bool = True
    min: float | int | None = None
    max: float | int | None = None
    enum_values: list[int] = Field(default_factory=list)


class SimulatedProperty(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: int | None = None
    name: str | None = None
    access: int
    change_mode: int
    area_type: int
    value_kind: str
    areas: list[SimulatedArea] = Field(default_factory=lambda: [SimulatedArea()])

    @model_validator(mode="after")
    def _require_id_or_name(self) -> SimulatedProperty:
        if self.id is None and self.name is None:
            raise ValueError("A simulated property needs an 'id' or a 'name'")
        return self

    def to_descriptor(self, property_id: int) -> RawPropertyDescriptor:
        return RawPropertyDescriptor(
            property_id=property_id,
            access=self.access,
            change_mode=self.change_mode,
            area_type=self.area_type,
            value_kind=self.value_kind,
            area_configs=tuple(
                AreaIdConfig(
                    area_id=area.area_id,
                    min_value=area.min,
                    max_value=area.max,
                    supported_enum_values=tuple(area.enum_values),
                )
                for area in self.areas
            ),
        )


class SimulatorFixture(BaseModel):
    model_config = ConfigDict(extra="ignore")

    properties: list[SimulatedProperty]


class InMemoryVehiclePropertyService:
    """A :class:`~cartool.core.protocols.VehiclePropertyService` backed by dicts."""

    def __init__(
        self,
        descriptors: Iterable[RawPropertyDescriptor] = (),
        values: Mapping[tuple[int, int], Any] | None = None,
        unavailable: Iterable[tuple[int, int]] = (),
    ):
        self._descriptors: dict[int, RawPropertyDescriptor] = {d.property_id: d for d in descriptors}
        self._values: dict[tuple[int, int], Any] = dict(values or {})
        self._unavailable: set[tuple[int, int]] = set(unavailable)

    @classmethod
    def from_yaml(
        cls,
        path: str | Path,
        platform_ids: Mapping[str, int] | None = None,
    ) -> InMemoryVehiclePropertyService:
        """Build a service from a fixture file."""
        path = Path(path)
        if not path.exists():
            raise ConfigFileNotFoundError(str(path))

        try:
            fixture = SimulatorFixture.model_validate(yaml.safe_load(path.read_text(encoding="utf-8")))
        except (yaml.YAMLError, ValueError) as e:
            raise ConfigError(f"Invalid simulator fixture {path.name}: {e}", cause=e) from e

        if platform_ids is None:
            platform_ids = load_platform_ids()

        descriptors = []
        values: dict[tuple[int, int], Any] = {}
        unavailable: list[tuple[int, int]] = []
        for prop in fixture.properties:
            property_id = prop.id if prop.id is not None else platform_ids.get(prop.name)
            if property_id is None:
                raise ConfigError(f"Unknown system property {prop.name} in simulator fixture {path.name}.")
            descriptors.append(prop.to_descriptor(property_id))
            for area in prop.areas:
                values[(property_id, area.area_id)] = area.value
                if not area.available:
                    unavailable.append((property_id, area.area_id))

        logger.info("simulator_loaded", fixture=path.name, properties=len(descriptors))
        return cls(descriptors, values, unavailable)

    # ── Protocol ─────────────────────────────────────────────────

    def get_property_list(self, property_ids: Iterable[int]) -> list[RawPropertyDescriptor]:
        return [self._descriptors[pid] for pid in property_ids if pid in self._descriptors]

    def is_property_available(self, property_id: int, area_id: int) -> bool:
        return property_id in self._descriptors and (property_id, area_id) not in self._unavailable

    def set_available(self, property_id: int, area_id: int, available: bool) -> None:
        if available:
            self._unavailable.discard((property_id, area_id))
        else:
            self._unavailable.add((property_id, area_id))

    def _get(self, property_id: int, area_id: int) -> Any:
        return self._values.get((property_id, area_id))

    def _set(self, property_id: int, area_id: int, value: Any) -> None:
        logger.debug("simulated_write", property_id=property_id, area_id=area_id, value=value)
        self._values[(property_id, area_id)] = value

    def get_string_property(self, property_id: int, area_id: int) -> str | None:
        return self._get(property_id, area_id)

    def set_string_property(self, property_id: int, area_id: int, value: str) -> None:
        self._set(property_id, area_id, value)

    def get_boolean_property(self, property_id: int, area_id: int) -> bool:
        return bool(self._get(property_id, area_id))

    def set_boolean_property(self, property_id: int, area_id: int, value: bool) -> None:
        self._set(property_id, area_id, value)

    def get_int_property(self, property_id: int, area_id: int) -> int:
        return int(self._get(property_id, area_id) or 0)

    def set_int_property(self, property_id: int, area_id: int, value: int) -> None:
        self._set(property_id, area_id, value)

    def get_int_array_property(self, property_id: int, area_id: int) -> list[int]:
        return list(self._get(property_id, area_id) or [])

    def set_int_array_property(self, property_id: int, area_id: int, value: list[int]) -> None:
        self._set(property_id, area_id, list(value))

    def get_long_property(self, property_id: int, area_id: int) -> int | None:
        return self._get(property_id, area_id)

    def set_long_property(self, property_id: int, area_id: int, value: int) -> None:
        self._set(property_id, area_id, value)

    def get_long_array_property(self, property_id: int, area_id: int) -> list[int] | None:
        return self._get(property_id, area_id)

    def set_long_array_property(self, property_id: int, area_id: int, value: list[int]) -> None:
        self._set(property_id, area_id, list(value))

    def get_float_property(self, property_id: int, area_id: int) -> float:
        return float(self._get(property_id, area_id) or 0.0)

    def set_float_property(self, property_id: int, area_id: int, value: float) -> None:
        self._set(property_id, area_id, value)

    def get_float_array_property(self, property_id: int, area_id: int) -> list[float] | None:
        return self._get(property_id, area_id)

    def set_float_array_property(self, property_id: int, area_id: int, value: list[float]) -> None:
        self._set(property_id, area_id, list(value))


__all__ = ["InMemoryVehiclePropertyService", "SimulatorFixture"]
