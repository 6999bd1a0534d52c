"""Area id → human description."""

from __future__ import annotations

from cartool.core.errors import InternalInvariantError
from cartool.property.constants import (
    AREA_DECODER_MAP,
    AREA_SPECIFIC_DESCRIPTION_TEMPLATE,
    GLOBAL_AREA_DESCRIPTION,
    VehicleAreaType,
)


def decode_area_id(area_type: int, area_id: int) -> str:
    """
    Describe which part of the vehicle an area id targets.

    Labels appear in the declaration order of the area type's flags, not in
    bit order, so the same mask always yields the same sentence.

    Raises:
        InternalInvariantError: If the area type has no decoder table, or
            no flag of the table is set in ``area_id``
    """
    if area_type == VehicleAreaType.GLOBAL:
        return GLOBAL_AREA_DESCRIPTION

    flags = AREA_DECODER_MAP.get(area_type)
    if flags is None:
        raise InternalInvariantError(f"No area decoder for area type {area_type}").with_context(
            area_type=area_type, area_id=area_id
        )

    labels = [label for flag, label in flags if area_id & flag]
    if not labels:
        raise InternalInvariantError(
            f"Area id {area_id} matches no known area for area type {area_type}"
        ).with_context(area_type=area_type, area_id=area_id)

    return AREA_SPECIFIC_DESCRIPTION_TEMPLATE % ", ".join(labels)


__all__ = ["decode_area_id"]
