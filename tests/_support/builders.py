"""Registry and descriptor builders shared by the property tests."""

from __future__ import annotations

from cartool.property.constants import (
    VehicleAreaType,
    VehiclePropertyAccess,
    VehiclePropertyChangeMode,
)
from cartool.property.descriptors import AreaIdConfig, RawPropertyDescriptor
from cartool.registry.models import Property, PropertyRegistry


def make_registry(*ids: int, prefix: str = "PROPERTY") -> PropertyRegistry:
    """Registry with one property per id, named ``<prefix>_<id>``."""
    return PropertyRegistry(
        Property(name=f"{prefix}_{pid}", description=f"Description of {prefix}_{pid}", id=pid)
        for pid in ids
    )


def make_descriptor(
    property_id: int,
    *,
    access: int = VehiclePropertyAccess.READ_WRITE,
    value_kind: str = "string",
    change_mode: int = VehiclePropertyChangeMode.STATIC,
    area_type: int = VehicleAreaType.GLOBAL,
    area_ids: tuple[int, ...] = (0,),
    area_configs: tuple[AreaIdConfig, ...] | None = None,
) -> RawPropertyDescriptor:
    if area_configs is None:
        area_configs = tuple(AreaIdConfig(area_id=area_id) for area_id in area_ids)
    return RawPropertyDescriptor(
        property_id=property_id,
        access=access,
        change_mode=change_mode,
        area_type=area_type,
        value_kind=value_kind,
        area_configs=area_configs,
    )
