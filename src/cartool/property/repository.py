"""
Car property repository: the catalog and the typed read/write façade.

Manifesto:
Agents address vehicle properties by registry name, never by raw id, and
only ever see properties the registry allows. The repository is the single
seam between the loosely-typed vehicle property service and that contract:
it filters what the service reports, describes what survives, and routes
typed reads and writes to the right service call.

Architecture:
    ::

        CarPropertyRepository(service, registry)
        ├── get_property_list()                → JSON array of CarPropertyProfile
        │     service.get_property_list(registry ids)
        │       → is_compatible() per descriptor (drop + warn on failure)
        │       → CarPropertyProfile (registry name/description, decoded areas)
        │
        ├── get_value(kind, name, area_id)      name → id → availability → getter
        ├── set_value(kind, name, area_id, v)   name → id → setter → "success"
        └── get_<kind>_property / set_<kind>_property convenience methods

    Per-kind dispatch goes through ``VALUE_ACCESSORS``: one record per
    ``ValueKind`` naming the service getter/setter and the value returned
    when the service reports none.

Error semantics:
    - Unknown name → ``PropertyNotAuthorizedError`` (reads and writes)
    - Unavailable (reads only) → ``PropertyNotAvailableError``
    - Service data the registry does not know → ``InternalInvariantError``

Tags:
    vehicle-property, catalog, facade, dispatch, cartool

Doc-Types:
    - API Reference
    - Architecture Documentation
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from numbers import Real
from typing import Any

from cartool.core.errors import (
    InternalInvariantError,
    PropertyNotAuthorizedError,
    PropertyNotAvailableError,
)
from cartool.core.logging import get_logger
from cartool.core.protocols import VehiclePropertyService
from cartool.property.areas import decode_area_id
from cartool.property.compat import is_compatible
from cartool.property.constants import RESULT_SUCCESS, SUPPORTED_DATA_TYPE_MAP, ValueKind
from cartool.property.descriptors import AreaIdConfig, RawPropertyDescriptor
from cartool.property.models import AreaIdProfile, CarPropertyProfile, serialize_profiles
from cartool.registry.loader import get_registry
from cartool.registry.models import Property, PropertyRegistry

logger = get_logger(__name__)


@dataclass(frozen=True)
class ValueAccessor:
    """Service methods for one value kind and the default for a missing value."""

    getter: str
    setter: str
    default: Callable[[], Any] | None = None


VALUE_ACCESSORS: dict[ValueKind, ValueAccessor] = {
    ValueKind.STRING: ValueAccessor("get_string_property", "set_string_property", default=str),
    ValueKind.BOOLEAN: ValueAccessor("get_boolean_property", "set_boolean_property"),
    ValueKind.INT32: ValueAccessor("get_int_property", "set_int_property"),
    ValueKind.INT32_ARRAY: ValueAccessor("get_int_array_property", "set_int_array_property"),
    ValueKind.INT64: ValueAccessor("get_long_property", "set_long_property", default=int),
    ValueKind.INT64_ARRAY: ValueAccessor("get_long_array_property", "set_long_array_property", default=list),
    ValueKind.FLOAT: ValueAccessor("get_float_property", "set_float_property"),
    ValueKind.FLOAT_ARRAY: ValueAccessor("get_float_array_property", "set_float_array_property", default=list),
}


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _bound_to_str(value: Any) -> str:
    return str(value) if _is_number(value) else ""


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def to_int64(value: Any) -> int:
    """Narrow a number to a signed 64-bit integer.

    Floats are truncated toward zero. NaN becomes 0 and anything outside the
    int64 range, infinities included, is clamped to the nearest bound.
    """
    if value != value:
        return 0
    if value >= INT64_MAX:
        return INT64_MAX
    if value <= INT64_MIN:
        return INT64_MIN
    return int(value)


class CarPropertyRepository:
    """Façade over a :class:`VehiclePropertyService`, restricted to the registry.

    Args:
        service: The vehicle property service to read from and write to
        registry: Allow-listed properties; defaults to the process-wide registry
    """

    def __init__(self, service: VehiclePropertyService, registry: PropertyRegistry | None = None):
        self._service = service
        self._registry = registry

    @property
    def registry(self) -> PropertyRegistry:
        if self._registry is None:
            self._registry = get_registry()
        return self._registry

    # ── Catalog ──────────────────────────────────────────────────

    def get_property_list(self) -> str:
        """Return the catalog of supported, allow-listed properties as JSON.

        Incompatible descriptors are dropped even when the registry does not
        know their id.

        Raises:
            InternalInvariantError: If the service reports a compatible
                property the registry does not allow
        """
        registry = self.registry
        descriptors = self._service.get_property_list(registry.ids)

        profiles = []
        for descriptor in descriptors:
            allowed = registry.get(descriptor.property_id)
            if not is_compatible(descriptor, allowed):
                continue
            if allowed is None:
                raise InternalInvariantError(
                    f"Property ID '{descriptor.property_id}' is not in the allowed properties list"
                ).with_context(property_id=descriptor.property_id)
            profiles.append(self._to_profile(descriptor, allowed))

        logger.debug("property_list_built", reported=len(descriptors), published=len(profiles))
        return serialize_profiles(profiles)

    def _to_profile(self, descriptor: RawPropertyDescriptor, allowed: Property) -> CarPropertyProfile:
        return CarPropertyProfile(
            property_name=allowed.name,
            property_description=allowed.description,
            access=int(descriptor.access),
            data_type=int(SUPPORTED_DATA_TYPE_MAP[ValueKind(descriptor.value_kind)]),
            change_mode=int(descriptor.change_mode),
            area_type=int(descriptor.area_type),
            area_id_profiles=[
                self._to_area_profile(descriptor.area_type, config) for config in descriptor.area_configs
            ],
        )

    @staticmethod
    def _to_area_profile(area_type: int, config: AreaIdConfig) -> AreaIdProfile:
        return AreaIdProfile(
            area_id=int(config.area_id),
            area_id_description=decode_area_id(area_type, config.area_id),
            min_value=_bound_to_str(config.min_value),
            max_value=_bound_to_str(config.max_value),
            supported_enum_values=[to_int64(v) for v in config.supported_enum_values if _is_number(v)],
        )

    # ── Typed access ─────────────────────────────────────────────

    def _resolve(self, property_name: str) -> int:
        property_id = self.registry.id_for(property_name)
        if property_id is None:
            raise PropertyNotAuthorizedError(property_name)
        return property_id

    def get_value(self, kind: ValueKind, property_name: str, area_id: int) -> Any:
        """
        Read a property value of the given kind.

        Raises:
            PropertyNotAuthorizedError: If the name is not in the registry
            PropertyNotAvailableError: If the service reports the property unavailable
        """
        accessor = VALUE_ACCESSORS[kind]
        property_id = self._resolve(property_name)
        if not self._service.is_property_available(property_id, area_id):
            raise PropertyNotAvailableError(property_name).with_context(
                property_id=property_id, area_id=area_id
            )

        value = getattr(self._service, accessor.getter)(property_id, area_id)
        if value is None and accessor.default is not None:
            return accessor.default()
        return value

    def set_value(self, kind: ValueKind, property_name: str, area_id: int, value: Any) -> str:
        """
        Write a property value of the given kind.

        Availability is not checked; the service decides whether the write
        takes effect.

        Raises:
            PropertyNotAuthorizedError: If the name is not in the registry
        """
        accessor = VALUE_ACCESSORS[kind]
        property_id = self._resolve(property_name)
        getattr(self._service, accessor.setter)(property_id, area_id, value)
        return RESULT_SUCCESS

    def get_string_property(self, property_name: str, area_id: int) -> str:
        return self.get_value(ValueKind.STRING, property_name, area_id)

    def set_string_property(self, property_name: str, area_id: int, value: str) -> str:
        return self.set_value(ValueKind.STRING, property_name, area_id, value)

    def get_boolean_property(self, property_name: str, area_id: int) -> bool:
        return self.get_value(ValueKind.BOOLEAN, property_name, area_id)

    def set_boolean_property(self, property_name: str, area_id: int, value: bool) -> str:
        return self.set_value(ValueKind.BOOLEAN, property_name, area_id, value)

    def get_int_property(self, property_name: str, area_id: int) -> int:
        return self.get_value(ValueKind.INT32, property_name, area_id)

    def set_int_property(self, property_name: str, area_id: int, value: int) -> str:
        return self.set_value(ValueKind.INT32, property_name, area_id, value)

    def get_int_array_property(self, property_name: str, area_id: int) -> list[int]:
        return self.get_value(ValueKind.INT32_ARRAY, property_name, area_id)

    def set_int_array_property(self, property_name: str, area_id: int, value: list[int]) -> str:
        return self.set_value(ValueKind.INT32_ARRAY, property_name, area_id, value)

    def get_long_property(self, property_name: str, area_id: int) -> int:
        return self.get_value(ValueKind.INT64, property_name, area_id)

    def set_long_property(self, property_name: str, area_id: int, value: int) -> str:
        return self.set_value(ValueKind.INT64, property_name, area_id, value)

    def get_long_array_property(self, property_name: str, area_id: int) -> list[int]:
        return self.get_value(ValueKind.INT64_ARRAY, property_name, area_id)

    def set_long_array_property(self, property_name: str, area_id: int, value: list[int]) -> str:
        return self.set_value(ValueKind.INT64_ARRAY, property_name, area_id, value)

    def get_float_property(self, property_name: str, area_id: int) -> float:
        return self.get_value(ValueKind.FLOAT, property_name, area_id)

    def set_float_property(self, property_name: str, area_id: int, value: float) -> str:
        return self.set_value(ValueKind.FLOAT, property_name, area_id, value)

    def get_float_array_property(self, property_name: str, area_id: int) -> list[float]:
        return self.get_value(ValueKind.FLOAT_ARRAY, property_name, area_id)

    def set_float_array_property(self, property_name: str, area_id: int, value: list[float]) -> str:
        return self.set_value(ValueKind.FLOAT_ARRAY, property_name, area_id, value)


__all__ = ["CarPropertyRepository", "ValueAccessor", "VALUE_ACCESSORS"]
