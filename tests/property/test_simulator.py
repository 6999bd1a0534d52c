"""Tests for the in-memory vehicle property service."""

import json

import pytest

from cartool.core.errors import ConfigError, ConfigFileNotFoundError
from cartool.core.protocols import VehiclePropertyService
from cartool.property.repository import CarPropertyRepository
from cartool.property.simulator import InMemoryVehiclePropertyService
from cartool.registry import build_registry
from cartool.registry.platform import VEHICLE_PROPERTY_IDS
from tests._support.builders import make_descriptor

INFO_VIN = VEHICLE_PROPERTY_IDS["INFO_VIN"]
HVAC_POWER_ON = VEHICLE_PROPERTY_IDS["HVAC_POWER_ON"]
HVAC_TEMPERATURE_SET = VEHICLE_PROPERTY_IDS["HVAC_TEMPERATURE_SET"]


@pytest.fixture
def shipped_fixture(repo_root):
    return InMemoryVehiclePropertyService.from_yaml(repo_root / "config" / "simulator_fixture.yaml")


class TestInMemoryService:
    def test_satisfies_protocol(self):
        assert isinstance(InMemoryVehiclePropertyService(), VehiclePropertyService)

    def test_property_list_filters_requested_ids(self):
        service = InMemoryVehiclePropertyService([make_descriptor(1), make_descriptor(2)])
        assert [d.property_id for d in service.get_property_list([2, 3])] == [2]

    def test_write_then_read(self):
        service = InMemoryVehiclePropertyService([make_descriptor(1)])

        service.set_float_property(1, 0, 19.5)
        service.set_long_array_property(1, 4, (1, 2))

        assert service.get_float_property(1, 0) == 19.5
        assert service.get_long_array_property(1, 4) == [1, 2]

    def test_missing_values(self):
        service = InMemoryVehiclePropertyService([make_descriptor(1)])

        assert service.get_string_property(1, 0) is None
        assert service.get_long_property(1, 0) is None
        assert service.get_boolean_property(1, 0) is False
        assert service.get_int_property(1, 0) == 0
        assert service.get_float_property(1, 0) == 0.0
        assert service.get_int_array_property(1, 0) == []

    def test_availability(self):
        service = InMemoryVehiclePropertyService([make_descriptor(1)], unavailable=[(1, 0)])

        assert service.is_property_available(1, 0) is False
        assert service.is_property_available(1, 2) is True
        assert service.is_property_available(9, 0) is False

        service.set_available(1, 0, True)
        assert service.is_property_available(1, 0) is True


class TestFromYaml:
    def test_loads_shipped_fixture(self, shipped_fixture):
        assert shipped_fixture.get_string_property(INFO_VIN, 0) == "1HGCM82633A004352"
        assert shipped_fixture.get_float_property(HVAC_TEMPERATURE_SET, 0x4) == 22.0
        assert shipped_fixture.is_property_available(HVAC_POWER_ON, 0x777) is False

    def test_explicit_id_and_bounds(self, write_config):
        path = write_config(
            """
properties:
  - id: 591397123
    access: 3
    change_mode: 1
    area_type: 3
    value_kind: int32
    areas:
      - area_id: 0x1
        value: 4
        min: 1
        max: 7
        enum_values: [1, 2]
""",
            name="fixture.yaml",
        )

        service = InMemoryVehiclePropertyService.from_yaml(path)

        (descriptor,) = service.get_property_list([591397123])
        assert descriptor.area_ids == [1]
        assert descriptor.area_configs[0].min_value == 1
        assert descriptor.area_configs[0].supported_enum_values == (1, 2)
        assert service.get_int_property(591397123, 1) == 4

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigFileNotFoundError):
            InMemoryVehiclePropertyService.from_yaml(tmp_path / "absent.yaml")

    def test_unknown_name(self, write_config):
        path = write_config(
            "properties:\n  - name: WARP_DRIVE\n    access: 1\n    change_mode: 0\n"
            "    area_type: 0\n    value_kind: boolean\n",
            name="fixture.yaml",
        )

        with pytest.raises(ConfigError) as exc_info:
            InMemoryVehiclePropertyService.from_yaml(path)

        assert str(exc_info.value) == "Unknown system property WARP_DRIVE in simulator fixture fixture.yaml."

    def test_name_resolved_with_custom_platform_ids(self, write_config):
        path = write_config(
            "properties:\n  - name: WARP_DRIVE\n    access: 1\n    change_mode: 0\n"
            "    area_type: 0\n    value_kind: boolean\n",
            name="fixture.yaml",
        )

        service = InMemoryVehiclePropertyService.from_yaml(path, {"WARP_DRIVE": 0x11200001})
        assert service.is_property_available(0x11200001, 0)

    @pytest.mark.parametrize(
        "text",
        [
            "properties: [",
            "properties:\n  - access: 1\n    change_mode: 0\n    area_type: 0\n    value_kind: boolean\n",
            "properties:\n  - id: 1\n    access: 1\n    change_mode: 0\n    area_type: 0\n"
            "    value_kind: boolean\n    colour: red\n",
        ],
    )
    def test_invalid_fixture(self, write_config, text):
        path = write_config(text, name="fixture.yaml")

        with pytest.raises(ConfigError) as exc_info:
            InMemoryVehiclePropertyService.from_yaml(path)

        assert str(exc_info.value).startswith("Invalid simulator fixture fixture.yaml")


class TestShippedCatalog:
    def test_catalog_of_shipped_config_and_fixture(self, repo_root, shipped_fixture):
        registry = build_registry(repo_root / "config" / "vehicle_properties.yaml")
        repository = CarPropertyRepository(shipped_fixture, registry)

        names = [entry["propertyName"] for entry in json.loads(repository.get_property_list())]

        assert "INFO_VIN" in names
        assert "TIRE_PRESSURE" in names
        assert "NIGHT_MODE" not in names

    def test_tire_pressure_wheels_in_fixture_order(self, repo_root, shipped_fixture):
        registry = build_registry(repo_root / "config" / "vehicle_properties.yaml")
        repository = CarPropertyRepository(shipped_fixture, registry)

        (tires,) = [e for e in json.loads(repository.get_property_list()) if e["propertyName"] == "TIRE_PRESSURE"]

        assert [p["areaId"] for p in tires["areaIdProfiles"]] == [1, 2, 8, 4]
        assert tires["areaIdProfiles"][2]["areaIdDescription"].endswith("left rear wheel.")
        assert tires["areaIdProfiles"][0]["minValue"] == "200.0"
