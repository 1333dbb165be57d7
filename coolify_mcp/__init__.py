"""Coolify MCP server: Coolify REST operations exposed as MCP tools."""

__version__ = "1.0.0"
