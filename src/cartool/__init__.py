"""
cartool - vehicle property catalog and typed access for agents.

- cartool.registry: allow-listed property registry (generation, loading)
- cartool.property: capability catalog and typed get/set façade
- cartool.mcp: MCP tool surface
- cartool.cli: ``cartool`` command line
"""

__version__ = "0.1.0"
