"""Process settings for cartool.

Settings are read from ``CARTOOL_*`` environment variables and an optional
``.env`` file, validated by pydantic at startup.

Fields
──────
config_path       : YAML property config (the allow-list source)
registry_path     : Generated registry artifact; preferred over config_path
platform_ids_path : Optional YAML/JSON mapping extending the platform id table
simulator_fixture : Optional fixture served by the in-memory vehicle service
log_level         : Structlog log level
json_logs         : Force JSON (True) or console (False) logs; auto when unset
host / port       : Bind address for the MCP HTTP transport

Examples:
    >>> CarToolSettings(log_level="DEBUG").log_level
    'DEBUG'
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CarToolSettings(BaseSettings):
    """Settings shared by the CLI, the MCP server and ``get_registry()``."""

    model_config = SettingsConfigDict(
        env_prefix="CARTOOL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Registry ─────────────────────────────────────────────────
    config_path: Path = Field(
        default=Path("config/vehicle_properties.yaml"),
        description="YAML property config listing allowed properties",
    )
    registry_path: Path | None = Field(
        default=None,
        description="Generated registry artifact (JSON); used instead of config_path when set",
    )
    platform_ids_path: Path | None = Field(
        default=None,
        description="Extra platform property ids (YAML/JSON mapping of name to id)",
    )
    simulator_fixture: Path | None = Field(
        default=None,
        description="YAML fixture for the in-memory vehicle service used by `cartool serve`",
    )

    # ── Observability ────────────────────────────────────────────
    log_level: str = "INFO"
    json_logs: bool | None = None

    # ── Network ──────────────────────────────────────────────────
    host: str = "0.0.0.0"
    port: int = 8110


_settings: CarToolSettings | None = None


def get_settings(*, _force_reload: bool = False) -> CarToolSettings:
    """Load, validate, and cache the process settings."""
    global _settings
    if _settings is None or _force_reload:
        _settings = CarToolSettings()
    return _settings


__all__ = ["CarToolSettings", "get_settings"]
