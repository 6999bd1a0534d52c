"""Tests for cartool.registry.generator: config rules and the artifact."""

import json

import pytest

from cartool.core.errors import ConfigFileNotFoundError, RegistryConfigError
from cartool.registry.generator import ARTIFACT_FILENAME, build_registry, generate, parse_config
from cartool.registry.platform import VEHICLE_PROPERTY_IDS


class TestGenerate:
    def test_writes_artifact_for_valid_config(self, valid_config, tmp_path):
        artifact = generate(valid_config, tmp_path / "out")

        assert artifact == tmp_path / "out" / ARTIFACT_FILENAME
        data = json.loads(artifact.read_text())
        assert data == {
            "properties": [
                {
                    "name": "INFO_VIN",
                    "description": "Vehicle identification number.",
                    "id": VEHICLE_PROPERTY_IDS["INFO_VIN"],
                },
                {"name": "CUSTOM_PROPERTY", "description": "A vendor extension.", "id": 591397123},
            ]
        }

    def test_symbolic_name_resolved(self, valid_config):
        registry = build_registry(valid_config)
        assert registry.id_for("INFO_VIN") == 0x11100100
        assert registry.id_for("CUSTOM_PROPERTY") == 591397123

    def test_custom_platform_table(self, write_config):
        path = write_config(
            """
properties:
  - name: OEM_SYSTEM_PROP
    description: Known only to this platform.
"""
        )
        registry = build_registry(path, platform_ids={"OEM_SYSTEM_PROP": 0x11100999})
        assert registry.get(0x11100999).name == "OEM_SYSTEM_PROP"


class TestConfigRules:
    def test_missing_file(self, tmp_path):
        missing = tmp_path / "non_existent.yaml"
        with pytest.raises(ConfigFileNotFoundError) as exc:
            generate(missing, tmp_path)
        assert exc.value.message == f"Config file not found at: {missing}"

    @pytest.mark.parametrize(
        "text",
        [
            "- name: prop1\n  description: desc\n",
            "other: []\n",
            "properties: not-a-list\n",
            "",
        ],
    )
    def test_missing_properties_list(self, write_config, text):
        with pytest.raises(RegistryConfigError) as exc:
            parse_config(write_config(text))
        assert exc.value.message == "YAML must contain a top-level key 'properties' with a list of properties."

    def test_missing_name(self, write_config):
        path = write_config(
            """
properties:
  - description: This property is missing its name
    id: 999
"""
        )
        with pytest.raises(RegistryConfigError) as exc:
            parse_config(path)
        assert exc.value.message == "A property is missing the required 'name' key."

    def test_duplicate_names_listed_once(self, write_config):
        path = write_config(
            """
properties:
  - name: X
    description: desc 1
  - name: ANOTHER_PROP
    description: desc 2
  - name: X
    description: desc 3
  - name: X
    description: desc 4
""",
            name="test.yaml",
        )
        with pytest.raises(RegistryConfigError) as exc:
            parse_config(path)
        assert exc.value.message == "The same property name is declared multiple times in test.yaml: X"

    def test_duplicate_names_first_seen_order(self, write_config):
        path = write_config(
            """
properties:
  - {name: B, description: d}
  - {name: A, description: d}
  - {name: A, description: d}
  - {name: B, description: d}
""",
            name="test.yaml",
        )
        with pytest.raises(RegistryConfigError) as exc:
            parse_config(path)
        assert exc.value.message.endswith("test.yaml: B, A")

    def test_duplicate_ids(self, write_config):
        path = write_config(
            """
properties:
  - name: PROP1
    description: desc 1
    id: 12345
  - name: PROP2
    description: desc 2
    id: 12345
""",
            name="test.yaml",
        )
        with pytest.raises(RegistryConfigError) as exc:
            parse_config(path)
        assert exc.value.message == "The same property id is declared multiple times in test.yaml: 12345"

    def test_system_id_rejected(self, write_config):
        path = write_config(
            """
properties:
  - name: INFO_DRIVER_SEAT
    description: Driver's seat location
    id: 356516106
"""
        )
        with pytest.raises(RegistryConfigError) as exc:
            parse_config(path)
        assert exc.value.message == "An ID was provided for system property 356516106. Use the name only."

    @pytest.mark.parametrize("description", ['" "', '""', None])
    def test_missing_description(self, write_config, description):
        line = f"\n    description: {description}" if description is not None else ""
        path = write_config(f"properties:\n  - name: CUSTOM\n    id: 999{line}\n")
        with pytest.raises(RegistryConfigError) as exc:
            parse_config(path)
        assert exc.value.message == "A description is missing for property CUSTOM."

    def test_rules_checked_in_order(self, write_config):
        """Duplicate names win over a duplicate id and a missing description."""
        path = write_config(
            """
properties:
  - name: A
    id: 1
  - name: A
    id: 1
""",
            name="test.yaml",
        )
        with pytest.raises(RegistryConfigError) as exc:
            parse_config(path)
        assert "property name is declared multiple times" in exc.value.message

    def test_unknown_symbolic_name(self, write_config):
        path = write_config(
            """
properties:
  - name: NOT_A_PLATFORM_PROPERTY
    description: Missing an id.
"""
        )
        with pytest.raises(RegistryConfigError) as exc:
            build_registry(path)
        assert exc.value.message == (
            "Unknown system property NOT_A_PLATFORM_PROPERTY. Provide an explicit id for vendor properties."
        )

    def test_non_integer_id(self, write_config):
        path = write_config(
            """
properties:
  - name: CUSTOM
    description: desc
    id: "12"
"""
        )
        with pytest.raises(RegistryConfigError, match="Invalid definition for property CUSTOM"):
            parse_config(path)

    def test_invalid_yaml(self, write_config):
        with pytest.raises(RegistryConfigError, match="Invalid YAML"):
            parse_config(write_config("properties: [unclosed\n"))

    def test_failed_config_writes_nothing(self, write_config, tmp_path):
        path = write_config("properties:\n  - name: X\n")
        with pytest.raises(RegistryConfigError):
            generate(path, tmp_path / "out")
        assert not (tmp_path / "out" / ARTIFACT_FILENAME).exists()


class TestShippedConfig:
    def test_default_config_is_valid(self, repo_root):
        registry = build_registry(repo_root / "config" / "vehicle_properties.yaml")
        assert "INFO_VIN" in registry.by_name
        assert all(p.description.strip() for p in registry)
