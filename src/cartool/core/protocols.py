"""
Protocol definitions for cartool's external collaborators.

The vehicle property service is owned by the host (a car service binding,
a simulator, a test double). cartool only depends on its shape, so any
object with these methods can be handed to ``CarPropertyRepository``.

Architecture:
    ::

        VehiclePropertyService
        ├── get_property_list(ids)             → descriptors for the ids
        ├── is_property_available(id, area)    → bool
        └── get_<kind>_property / set_<kind>_property, per kind:
            string, boolean, int, int_array, long, long_array,
            float, float_array

    Getters for string, long, long_array and float_array may return
    ``None`` to report that no value is present. Boolean, int and float
    getters always return a value.

Tags:
    protocol, vehicle-property, service, contracts, cartool

Doc-Types:
    - API Reference
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from cartool.property.descriptors import RawPropertyDescriptor


@runtime_checkable
class VehiclePropertyService(Protocol):
    """Typed access to a vehicle's hardware properties, keyed by (id, area id)."""

    def get_property_list(self, property_ids: Iterable[int]) -> Sequence[RawPropertyDescriptor]:
        """Return descriptors for the requested ids that the vehicle supports."""
        ...

    def is_property_available(self, property_id: int, area_id: int) -> bool:
        ...

    def get_string_property(self, property_id: int, area_id: int) -> str | None:
        ...

    def set_string_property(self, property_id: int, area_id: int, value: str) -> None:
        ...

    def get_boolean_property(self, property_id: int, area_id: int) -> bool:
        ...

    def set_boolean_property(self, property_id: int, area_id: int, value: bool) -> None:
        ...

    def get_int_property(self, property_id: int, area_id: int) -> int:
        ...

    def set_int_property(self, property_id: int, area_id: int, value: int) -> None:
        ...

    def get_int_array_property(self, property_id: int, area_id: int) -> list[int]:
        ...

    def set_int_array_property(self, property_id: int, area_id: int, value: list[int]) -> None:
        ...

    def get_long_property(self, property_id: int, area_id: int) -> int | None:
        ...

    def set_long_property(self, property_id: int, area_id: int, value: int) -> None:
        ...

    def get_long_array_property(self, property_id: int, area_id: int) -> list[int] | None:
        ...

    def set_long_array_property(self, property_id: int, area_id: int, value: list[int]) -> None:
        ...

    def get_float_property(self, property_id: int, area_id: int) -> float:
        ...

    def set_float_property(self, property_id: int, area_id: int, value: float) -> None:
        ...

    def get_float_array_property(self, property_id: int, area_id: int) -> list[float] | None:
        ...

    def set_float_array_property(self, property_id: int, area_id: int, value: list[float]) -> None:
        ...


__all__ = ["VehiclePropertyService"]
