"""Tests for cartool.registry.platform."""

import json

import pytest

from cartool.core.errors import ConfigFileNotFoundError, RegistryConfigError
from cartool.registry.platform import VEHICLE_PROPERTY_IDS, is_system_property_id, load_platform_ids


class TestPlatformIds:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("INFO_VIN", 0x11100100),
            ("INFO_DRIVER_SEAT", 356516106),
            ("HVAC_TEMPERATURE_SET", 0x15600503),
            ("DOOR_LOCK", 0x16200B02),
            ("TIRE_PRESSURE", 0x17600309),
        ],
    )
    def test_composed_ids(self, name, expected):
        assert VEHICLE_PROPERTY_IDS[name] == expected

    def test_all_ids_are_system_ids(self):
        assert all(is_system_property_id(pid) for pid in VEHICLE_PROPERTY_IDS.values())

    def test_ids_unique(self):
        assert len(set(VEHICLE_PROPERTY_IDS.values())) == len(VEHICLE_PROPERTY_IDS)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            VEHICLE_PROPERTY_IDS["NEW"] = 1  # type: ignore[index]

    def test_vendor_id_is_not_system(self):
        assert not is_system_property_id(591397123)


class TestLoadPlatformIds:
    def test_default(self):
        assert load_platform_ids() is VEHICLE_PROPERTY_IDS

    def test_yaml_extends_table(self, tmp_path):
        path = tmp_path / "ids.yaml"
        path.write_text("OEM_PROP: 0x11100999\nINFO_VIN: 0x11100101\n")

        ids = load_platform_ids(path)

        assert ids["OEM_PROP"] == 0x11100999
        assert ids["INFO_VIN"] == 0x11100101
        assert ids["DOOR_LOCK"] == VEHICLE_PROPERTY_IDS["DOOR_LOCK"]

    def test_json(self, tmp_path):
        path = tmp_path / "ids.json"
        path.write_text(json.dumps({"OEM_PROP": 286264729}))
        assert load_platform_ids(path)["OEM_PROP"] == 286264729

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigFileNotFoundError):
            load_platform_ids(tmp_path / "missing.yaml")

    @pytest.mark.parametrize("text", ["- a\n- b\n", "OEM_PROP: abc\n", "OEM_PROP: true\n"])
    def test_invalid_content(self, tmp_path, text):
        path = tmp_path / "ids.yaml"
        path.write_text(text)
        with pytest.raises(RegistryConfigError):
            load_platform_ids(path)
