"""Catalog entities published to agents.

Field names are snake_case in Python and camelCase on the wire
(``propertyName``, ``areaIdProfiles``, ...). ``serialize_profiles`` is the
only place the catalog is turned into text.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class _CatalogModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class AreaIdProfile(_CatalogModel):
    """Constraints of one property in one area."""

    area_id: int = Field(description="Area bitmask; 0 for global properties")
    area_id_description: str = Field(description="Which part of the vehicle the area id targets")
    min_value: str = Field(default="", description="Lower bound as text; empty when unbounded")
    max_value: str = Field(default="", description="Upper bound as text; empty when unbounded")
    supported_enum_values: list[int] = Field(
        default_factory=list, description="Accepted enum values; empty when not an enum"
    )


class CarPropertyProfile(_CatalogModel):
    """One catalog entry: a property's identity, access rules and areas."""

    property_name: str
    property_description: str
    access: int
    data_type: int
    change_mode: int
    area_type: int
    area_id_profiles: list[AreaIdProfile] = Field(default_factory=list)


_PROFILE_LIST = TypeAdapter(list[CarPropertyProfile])


def serialize_profiles(profiles: Sequence[CarPropertyProfile]) -> str:
    """Serialize profiles, in order, as one compact JSON array."""
    return _PROFILE_LIST.dump_json(list(profiles), by_alias=True).decode()


__all__ = ["AreaIdProfile", "CarPropertyProfile", "serialize_profiles"]
