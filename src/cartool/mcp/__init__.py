"""cartool MCP Server.

Model Context Protocol (MCP) server exposing the vehicle property catalog
and typed property access as AI-callable tools.

Usage::

    # stdio mode (default)
    cartool-mcp

    # HTTP mode
    cartool-mcp --transport http --port 8110

"""

from cartool.mcp.server import attach_service, create_server, mcp, run

__all__ = [
    "attach_service",
    "create_server",
    "mcp",
    "run",
]
