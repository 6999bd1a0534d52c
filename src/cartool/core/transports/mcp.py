"""MCP server scaffold for cartool.

Creates the FastMCP instance and starts it on stdio or streamable HTTP.
Tools are registered by :mod:`cartool.mcp.tools`; this module knows
nothing about vehicle properties.

Usage::

    from cartool.core.transports.mcp import create_cartool_mcp, run_cartool_mcp

    mcp = create_cartool_mcp(
        name="cartool",
        instructions="Vehicle property catalog and typed access ...",
        lifespan=app_lifespan,
    )

    @mcp.tool()
    async def get_property_list(): ...

    def run():
        run_cartool_mcp(mcp, default_port=8110)

The stdio transport owns stdout; logs go to stderr (see
``cartool.core.logging.configure_logging``).
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from cartool.core.logging import get_logger

logger = get_logger(__name__)

HTTP_TRANSPORTS = ("http", "streamable-http")


def create_cartool_mcp(
    name: str,
    instructions: str,
    lifespan: Callable[..., Any] | None = None,
) -> FastMCP:
    """Create a FastMCP server instance.

    Parameters
    ----------
    name : str
        MCP server name (e.g. "cartool").
    instructions : str
        Natural language description of the server's capabilities.
    lifespan : async context manager, optional
        Lifespan factory run around the server session.
    """
    return FastMCP(
        name,
        instructions=instructions,
        lifespan=lifespan,
    )


def parse_transport_args(argv: Sequence[str], default_port: int) -> tuple[str, int]:
    """Read ``--transport/-t`` and ``--port/-p`` from a console-script argv."""
    transport = "stdio"
    port = default_port
    args = list(argv)

    i = 0
    while i < len(args):
        if args[i] in ("--transport", "-t") and i + 1 < len(args):
            transport = args[i + 1]
            i += 2
        elif args[i] in ("--port", "-p") and i + 1 < len(args):
            port = int(args[i + 1])
            i += 2
        else:
            i += 1

    return transport, port


def run_cartool_mcp(
    mcp: FastMCP,
    *,
    transport: str | None = None,
    host: str = "0.0.0.0",
    port: int | None = None,
    default_port: int = 8110,
    log_name: str | None = None,
) -> None:
    """Start ``mcp`` in stdio or streamable-http mode.

    When ``transport`` is not given, ``--transport`` and ``--port`` are
    parsed from ``sys.argv`` so the function can serve as a console script
    entry point.
    """
    if transport is None:
        transport, parsed_port = parse_transport_args(sys.argv[1:], default_port)
        port = port or parsed_port
    port = port or default_port
    name = log_name or mcp.name

    if transport in HTTP_TRANSPORTS:
        mcp.settings.host = host
        mcp.settings.port = port
        logger.info("mcp_starting", server=name, transport="streamable-http", host=host, port=port)
        mcp.run(transport="streamable-http")
    else:
        logger.info("mcp_starting", server=name, transport="stdio")
        mcp.run(transport="stdio")


__all__ = ["create_cartool_mcp", "parse_transport_args", "run_cartool_mcp"]
