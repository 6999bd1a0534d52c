"""cartool MCP Server Implementation.

Exposes the vehicle property catalog and the typed get/set façade as MCP
tools.

This module is the entry point and re-export hub. Shared state lives in
`cartool.mcp._app`, tool functions in `cartool.mcp.tools.properties`.

Tags: mcp, server, ai-tools, vehicle-property, protocol
Doc-Types: API_REFERENCE, TECHNICAL_DESIGN
"""

from __future__ import annotations

from pathlib import Path

# Re-export shared state
from cartool.mcp._app import (  # noqa: F401
    AppContext,
    _get_context,
    attach_service,
    detach_service,
    lifespan,
    mcp,
)

# Import tools to trigger @mcp.tool() registration
from cartool.mcp.tools.properties import (  # noqa: F401
    get_boolean_property,
    get_float_array_property,
    get_float_property,
    get_int_array_property,
    get_int_property,
    get_long_array_property,
    get_long_property,
    get_property_list,
    get_string_property,
    set_boolean_property,
    set_float_array_property,
    set_float_property,
    set_int_array_property,
    set_int_property,
    set_long_array_property,
    set_long_property,
    set_string_property,
)

from cartool.core.logging import configure_logging, get_logger
from cartool.core.settings import get_settings
from cartool.core.transports.mcp import run_cartool_mcp
from cartool.property.simulator import InMemoryVehiclePropertyService
from cartool.registry.platform import load_platform_ids

logger = get_logger(__name__)


def create_server():
    """Create and return the MCP server instance."""
    return mcp


def run(
    fixture: Path | None = None,
    *,
    transport: str | None = None,
    port: int | None = None,
):
    """Run the MCP server (entry point for console script).

    Without an attached service, ``fixture`` (or ``CARTOOL_SIMULATOR_FIXTURE``)
    is loaded into an in-memory vehicle service first.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.json_logs, service="cartool-mcp")

    fixture = fixture or settings.simulator_fixture
    if fixture is not None and not _get_context().initialized:
        platform_ids = load_platform_ids(settings.platform_ids_path)
        attach_service(InMemoryVehiclePropertyService.from_yaml(fixture, platform_ids))

    run_cartool_mcp(
        mcp,
        transport=transport,
        host=settings.host,
        port=port,
        default_port=settings.port,
        log_name="cartool-mcp",
    )
