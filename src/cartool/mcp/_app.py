"""Shared MCP application state: server instance, attached service, helpers.

Tags: mcp, server, internal
Doc-Types: TECHNICAL_DESIGN
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any

from cartool.core.logging import get_logger
from cartool.core.protocols import VehiclePropertyService
from cartool.core.transports.mcp import create_cartool_mcp
from cartool.property.repository import CarPropertyRepository
from cartool.registry.models import PropertyRegistry

logger = get_logger(__name__)

_repository: CarPropertyRepository | None = None


@dataclass
class AppContext:
    """Application context for the MCP server."""

    repository: CarPropertyRepository | None = None

    @property
    def initialized(self) -> bool:
        return self.repository is not None


def attach_service(
    service: VehiclePropertyService,
    registry: PropertyRegistry | None = None,
) -> CarPropertyRepository:
    """Connect the tools to a vehicle property service (once, at startup)."""
    global _repository
    _repository = CarPropertyRepository(service, registry)
    logger.info("vehicle_service_attached", service=type(service).__name__)
    return _repository


def detach_service() -> None:
    global _repository
    _repository = None


@asynccontextmanager
async def lifespan(server: Any) -> AsyncIterator[AppContext]:
    """MCP server lifespan manager."""
    ctx = AppContext(repository=_repository)
    if ctx.initialized:
        logger.info("cartool_mcp_initialized")
    else:
        logger.warning("cartool_mcp_no_service", hint="call attach_service() before serving")
    yield ctx


mcp = create_cartool_mcp(
    name="cartool",
    instructions="""
cartool vehicle property server.

Capabilities:
- List the vehicle properties you may use, with access rules, data types
  and the valid area ids and value ranges for each
- Read and write property values by name, per area

Always call get_property_list first. Use the 'propertyName' and an 'areaId'
from its output, and the getter/setter that matches the property's dataType.
""",
    lifespan=lifespan,
)


def _get_context() -> AppContext:
    """Get current MCP context."""
    return AppContext(repository=_repository)
