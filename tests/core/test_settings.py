"""Tests for cartool.core.settings."""

from pathlib import Path

from cartool.core.settings import CarToolSettings, get_settings


class TestCarToolSettings:
    def test_defaults(self, monkeypatch):
        for var in ("CARTOOL_CONFIG_PATH", "CARTOOL_REGISTRY_PATH", "CARTOOL_PORT", "CARTOOL_LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)

        settings = CarToolSettings(_env_file=None)

        assert settings.config_path == Path("config/vehicle_properties.yaml")
        assert settings.registry_path is None
        assert settings.platform_ids_path is None
        assert settings.simulator_fixture is None
        assert settings.log_level == "INFO"
        assert settings.port == 8110

    def test_env_prefix(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CARTOOL_REGISTRY_PATH", str(tmp_path / "vehicle_property_config.json"))
        monkeypatch.setenv("CARTOOL_PORT", "9001")
        monkeypatch.setenv("CARTOOL_JSON_LOGS", "true")

        settings = CarToolSettings(_env_file=None)

        assert settings.registry_path == tmp_path / "vehicle_property_config.json"
        assert settings.port == 9001
        assert settings.json_logs is True


class TestGetSettings:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_force_reload(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("CARTOOL_LOG_LEVEL", "DEBUG")

        assert get_settings() is first
        reloaded = get_settings(_force_reload=True)
        assert reloaded is not first
        assert reloaded.log_level == "DEBUG"
