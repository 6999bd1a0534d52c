"""
Shared pytest fixtures and configuration for cartool tests.

This module provides:
- Process-wide state cleanup (registry, settings, attached MCP service)
- Uncached structlog routed through stdlib logging, so neither caplog
  nor structlog.testing.capture_logs miss events and nothing reaches stdout
- A MagicMock vehicle property service bound to the service protocol
- Config file writers for generator tests
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest
import structlog

# Ensure cartool package is importable
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from cartool.core import settings as settings_module
from cartool.core.protocols import VehiclePropertyService
from cartool.mcp import _app
from cartool.registry import clear_registry


# =============================================================================
# State Cleanup Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_process_state():
    """Reset the cached registry, settings and MCP service around each test."""
    clear_registry()
    settings_module._settings = None
    _app.detach_service()
    yield
    clear_registry()
    settings_module._settings = None
    _app.detach_service()


@pytest.fixture(autouse=True)
def plain_structlog():
    structlog.configure(
        processors=[structlog.processors.add_log_level, structlog.processors.JSONRenderer()],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def vehicle_service() -> MagicMock:
    """Mock vehicle property service; every property is available by default."""
    service = MagicMock(spec=VehiclePropertyService)
    service.is_property_available.return_value = True
    service.get_property_list.return_value = []
    return service


# =============================================================================
# Config File Fixtures
# =============================================================================


@pytest.fixture
def write_config(tmp_path):
    """Write YAML text to ``tmp_path/<name>`` and return the path."""

    def _write(text: str, name: str = "vehicle_properties.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def valid_config(write_config) -> Path:
    return write_config(
        """
properties:
  - name: INFO_VIN
    description: Vehicle identification number.
  - name: CUSTOM_PROPERTY
    id: 591397123
    description: A vendor extension.
"""
    )


@pytest.fixture
def repo_root() -> Path:
    return Path(__file__).parent.parent
