"""Raw capability descriptors as reported by a vehicle property service.

These are the loosely-typed inputs of the catalog: enumerated fields are
plain integers and may hold values cartool does not support. Nothing here
is validated; that is the job of :mod:`cartool.property.compat`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AreaIdConfig:
    """Per-area constraints of one property.

    ``min_value``/``max_value`` are ``None`` when the area has no bound.
    ``supported_enum_values`` may hold numbers of any width.
    """

    area_id: int
    min_value: Any = None
    max_value: Any = None
    supported_enum_values: tuple[Any, ...] = ()


@dataclass(frozen=True)
class RawPropertyDescriptor:
    """One property's capability descriptor, fetched fresh per request."""

    property_id: int
    access: int
    change_mode: int
    area_type: int
    value_kind: str
    area_configs: tuple[AreaIdConfig, ...] = field(default_factory=tuple)

    @property
    def area_ids(self) -> list[int]:
        return [config.area_id for config in self.area_configs]
