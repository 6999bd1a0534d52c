"""Compatibility checks for raw property descriptors.

A descriptor reaches the catalog only if every enumerated field, and every
area id it declares, is something cartool knows how to describe. The first
failing check is logged and the whole descriptor is dropped; nothing here
raises for bad service data.

Checks, in order::

    access       ∈ {READ, WRITE, READ_WRITE}
    area_type    ∈ {GLOBAL, WINDOW, SEAT, DOOR, MIRROR, WHEEL}
    change_mode  ∈ {STATIC, ON_CHANGE, CONTINUOUS}
    value_kind   ∈ ValueKind
    area ids     GLOBAL → 0, zoned → nonzero and within the area type's mask
"""

from __future__ import annotations

from typing import Any

from cartool.core.errors import InternalInvariantError
from cartool.core.logging import get_logger
from cartool.property.constants import (
    AREA_ID_MASKS,
    SUPPORTED_ACCESS_VALUES,
    SUPPORTED_AREA_TYPES,
    SUPPORTED_CHANGE_MODES,
    SUPPORTED_DATA_TYPE_MAP,
    VehicleAreaType,
)
from cartool.property.descriptors import RawPropertyDescriptor
from cartool.registry.models import Property

logger = get_logger(__name__)


def _reject(
    descriptor: RawPropertyDescriptor, allowed_property: Property | None, reason: str, value: Any
) -> bool:
    logger.warning(
        "incompatible_property",
        property=allowed_property.name if allowed_property is not None else None,
        property_id=descriptor.property_id,
        reason=reason,
        value=value,
    )
    return False


def is_area_id_supported(area_type: int, area_id: int) -> bool:
    """
    Check one area id against its area type.

    Raises:
        InternalInvariantError: If a zoned area type has no mask
    """
    if area_type == VehicleAreaType.GLOBAL:
        return area_id == 0

    mask = AREA_ID_MASKS.get(area_type)
    if mask is None:
        raise InternalInvariantError(f"No area id mask for area type {area_type}").with_context(
            area_type=area_type, area_id=area_id
        )
    return area_id != 0 and area_id & ~mask == 0


def is_compatible(descriptor: RawPropertyDescriptor, allowed_property: Property | None = None) -> bool:
    """Return True if ``descriptor`` can be published as a catalog entry.

    ``allowed_property`` only names the property in the warning; a descriptor
    the registry does not know is still checked.
    """
    if descriptor.access not in SUPPORTED_ACCESS_VALUES:
        return _reject(descriptor, allowed_property, "unsupported_access", descriptor.access)

    if descriptor.area_type not in SUPPORTED_AREA_TYPES:
        return _reject(descriptor, allowed_property, "unsupported_area_type", descriptor.area_type)

    if descriptor.change_mode not in SUPPORTED_CHANGE_MODES:
        return _reject(descriptor, allowed_property, "unsupported_change_mode", descriptor.change_mode)

    if descriptor.value_kind not in SUPPORTED_DATA_TYPE_MAP:
        return _reject(descriptor, allowed_property, "unsupported_data_type", descriptor.value_kind)

    for area_id in descriptor.area_ids:
        if not is_area_id_supported(descriptor.area_type, area_id):
            return _reject(descriptor, allowed_property, "unsupported_area_id", area_id)

    return True


__all__ = ["is_area_id_supported", "is_compatible"]
