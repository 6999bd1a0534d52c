"""MCP tools package: re-exports all tool registrations."""

# Importing each module triggers @mcp.tool() registration
from cartool.mcp.tools import properties  # noqa: F401
