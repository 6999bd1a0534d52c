"""Canonical platform property ids.

Platform (system-owned) properties are never given a literal id in the
property config; the registry generator resolves them by name against this
table. Ids are composed the way the vehicle HAL composes them::

    group (bits 28-31) | area (bits 24-27) | type (bits 16-23) | index (bits 0-15)

A host whose platform defines more properties than this table can supply a
YAML or JSON mapping of ``NAME: id`` through ``CARTOOL_PLATFORM_IDS_PATH``;
its entries extend and override the built-in ones.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import IntEnum
from pathlib import Path
from types import MappingProxyType

import yaml

from cartool.core.errors import ConfigFileNotFoundError, RegistryConfigError


class VehiclePropertyGroup(IntEnum):
    SYSTEM = 0x10000000
    VENDOR = 0x20000000
    BACKPORTED = 0x30000000
    MASK = 0xF0000000


class _Area(IntEnum):
    GLOBAL = 0x01000000
    WINDOW = 0x03000000
    MIRROR = 0x04000000
    SEAT = 0x05000000
    DOOR = 0x06000000
    WHEEL = 0x07000000


class _Type(IntEnum):
    STRING = 0x00100000
    BOOLEAN = 0x00200000
    INT32 = 0x00400000
    INT32_VEC = 0x00410000
    INT64 = 0x00500000
    INT64_VEC = 0x00510000
    FLOAT = 0x00600000
    FLOAT_VEC = 0x00610000


def is_system_property_id(property_id: int) -> bool:
    """True if the id lies in the reserved system-owned range."""
    return property_id & VehiclePropertyGroup.MASK == VehiclePropertyGroup.SYSTEM


def _system(index: int, area: _Area, value_type: _Type) -> int:
    return VehiclePropertyGroup.SYSTEM | area | value_type | index


VEHICLE_PROPERTY_IDS: Mapping[str, int] = MappingProxyType({
    # Vehicle information
    "INFO_VIN": _system(0x0100, _Area.GLOBAL, _Type.STRING),
    "INFO_MAKE": _system(0x0101, _Area.GLOBAL, _Type.STRING),
    "INFO_MODEL": _system(0x0102, _Area.GLOBAL, _Type.STRING),
    "INFO_MODEL_YEAR": _system(0x0103, _Area.GLOBAL, _Type.INT32),
    "INFO_FUEL_CAPACITY": _system(0x0104, _Area.GLOBAL, _Type.FLOAT),
    "INFO_FUEL_TYPE": _system(0x0105, _Area.GLOBAL, _Type.INT32_VEC),
    "INFO_EV_BATTERY_CAPACITY": _system(0x0106, _Area.GLOBAL, _Type.FLOAT),
    "INFO_EV_CONNECTOR_TYPE": _system(0x0107, _Area.GLOBAL, _Type.INT32_VEC),
    "INFO_FUEL_DOOR_LOCATION": _system(0x0108, _Area.GLOBAL, _Type.INT32),
    "INFO_EV_PORT_LOCATION": _system(0x0109, _Area.GLOBAL, _Type.INT32),
    "INFO_DRIVER_SEAT": _system(0x010A, _Area.SEAT, _Type.INT32),
    "INFO_EXTERIOR_DIMENSIONS": _system(0x010B, _Area.GLOBAL, _Type.INT32_VEC),
    # Performance and powertrain
    "PERF_ODOMETER": _system(0x0204, _Area.GLOBAL, _Type.FLOAT),
    "PERF_VEHICLE_SPEED": _system(0x0207, _Area.GLOBAL, _Type.FLOAT),
    "PERF_VEHICLE_SPEED_DISPLAY": _system(0x0208, _Area.GLOBAL, _Type.FLOAT),
    "PERF_STEERING_ANGLE": _system(0x0209, _Area.GLOBAL, _Type.FLOAT),
    "ENGINE_COOLANT_TEMP": _system(0x0301, _Area.GLOBAL, _Type.FLOAT),
    "ENGINE_OIL_LEVEL": _system(0x0303, _Area.GLOBAL, _Type.INT32),
    "ENGINE_OIL_TEMP": _system(0x0304, _Area.GLOBAL, _Type.FLOAT),
    "ENGINE_RPM": _system(0x0305, _Area.GLOBAL, _Type.FLOAT),
    "WHEEL_TICK": _system(0x0306, _Area.GLOBAL, _Type.INT64_VEC),
    "FUEL_LEVEL": _system(0x0307, _Area.GLOBAL, _Type.FLOAT),
    "FUEL_DOOR_OPEN": _system(0x0308, _Area.GLOBAL, _Type.BOOLEAN),
    "RANGE_REMAINING": _system(0x0308, _Area.GLOBAL, _Type.FLOAT),
    "EV_BATTERY_LEVEL": _system(0x0309, _Area.GLOBAL, _Type.FLOAT),
    "TIRE_PRESSURE": _system(0x0309, _Area.WHEEL, _Type.FLOAT),
    "EV_CHARGE_PORT_OPEN": _system(0x030A, _Area.GLOBAL, _Type.BOOLEAN),
    "EV_CHARGE_PORT_CONNECTED": _system(0x030B, _Area.GLOBAL, _Type.BOOLEAN),
    "GEAR_SELECTION": _system(0x0400, _Area.GLOBAL, _Type.INT32),
    "CURRENT_GEAR": _system(0x0401, _Area.GLOBAL, _Type.INT32),
    "PARKING_BRAKE_ON": _system(0x0402, _Area.GLOBAL, _Type.BOOLEAN),
    "FUEL_LEVEL_LOW": _system(0x0405, _Area.GLOBAL, _Type.BOOLEAN),
    "NIGHT_MODE": _system(0x0407, _Area.GLOBAL, _Type.BOOLEAN),
    "TURN_SIGNAL_STATE": _system(0x0408, _Area.GLOBAL, _Type.INT32),
    "IGNITION_STATE": _system(0x0409, _Area.GLOBAL, _Type.INT32),
    # Climate
    "HVAC_FAN_SPEED": _system(0x0500, _Area.SEAT, _Type.INT32),
    "HVAC_FAN_DIRECTION": _system(0x0501, _Area.SEAT, _Type.INT32),
    "HVAC_TEMPERATURE_CURRENT": _system(0x0502, _Area.SEAT, _Type.FLOAT),
    "HVAC_TEMPERATURE_SET": _system(0x0503, _Area.SEAT, _Type.FLOAT),
    "HVAC_DEFROSTER": _system(0x0504, _Area.WINDOW, _Type.BOOLEAN),
    "HVAC_AC_ON": _system(0x0505, _Area.SEAT, _Type.BOOLEAN),
    "HVAC_MAX_AC_ON": _system(0x0506, _Area.SEAT, _Type.BOOLEAN),
    "HVAC_RECIRC_ON": _system(0x0508, _Area.SEAT, _Type.BOOLEAN),
    "HVAC_AUTO_ON": _system(0x050A, _Area.SEAT, _Type.BOOLEAN),
    "HVAC_SEAT_TEMPERATURE": _system(0x050B, _Area.SEAT, _Type.INT32),
    "HVAC_TEMPERATURE_DISPLAY_UNITS": _system(0x050E, _Area.GLOBAL, _Type.INT32),
    "HVAC_POWER_ON": _system(0x0510, _Area.SEAT, _Type.BOOLEAN),
    "DISTANCE_DISPLAY_UNITS": _system(0x0600, _Area.GLOBAL, _Type.INT32),
    "ENV_OUTSIDE_TEMPERATURE": _system(0x0703, _Area.GLOBAL, _Type.FLOAT),
    # Body
    "DOOR_POS": _system(0x0B00, _Area.DOOR, _Type.INT32),
    "DOOR_LOCK": _system(0x0B02, _Area.DOOR, _Type.BOOLEAN),
    "MIRROR_Z_POS": _system(0x0B40, _Area.MIRROR, _Type.INT32),
    "MIRROR_Y_POS": _system(0x0B42, _Area.MIRROR, _Type.INT32),
    "MIRROR_FOLD": _system(0x0B46, _Area.GLOBAL, _Type.BOOLEAN),
    "SEAT_BELT_BUCKLED": _system(0x0B82, _Area.SEAT, _Type.BOOLEAN),
    "WINDOW_POS": _system(0x0BC0, _Area.WINDOW, _Type.INT32),
    "WINDOW_LOCK": _system(0x0BC4, _Area.WINDOW, _Type.BOOLEAN),
    # Lights
    "HEADLIGHTS_STATE": _system(0x0E00, _Area.GLOBAL, _Type.INT32),
    "HEADLIGHTS_SWITCH": _system(0x0E10, _Area.GLOBAL, _Type.INT32),
    "CABIN_LIGHTS_STATE": _system(0x0F01, _Area.GLOBAL, _Type.INT32),
    "CABIN_LIGHTS_SWITCH": _system(0x0F02, _Area.GLOBAL, _Type.INT32),
})


def load_platform_ids(path: str | Path | None = None) -> Mapping[str, int]:
    """Return the platform id table, extended by the mapping at ``path``.

    Raises:
        ConfigFileNotFoundError: If ``path`` is given but does not exist
        RegistryConfigError: If the file is not a mapping of names to integers
    """
    if path is None:
        return VEHICLE_PROPERTY_IDS

    path = Path(path)
    if not path.exists():
        raise ConfigFileNotFoundError(str(path))

    text = path.read_text(encoding="utf-8")
    data = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)

    if not isinstance(data, dict):
        raise RegistryConfigError(f"Platform id file {path.name} must contain a mapping of names to ids.")

    merged = dict(VEHICLE_PROPERTY_IDS)
    for name, property_id in data.items():
        if not isinstance(name, str) or isinstance(property_id, bool) or not isinstance(property_id, int):
            raise RegistryConfigError(
                f"Platform id file {path.name} has an invalid entry: {name!r}: {property_id!r}"
            )
        merged[name] = property_id
    return MappingProxyType(merged)


__all__ = [
    "VEHICLE_PROPERTY_IDS",
    "VehiclePropertyGroup",
    "is_system_property_id",
    "load_platform_ids",
]
