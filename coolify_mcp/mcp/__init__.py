"""MCP surface: tool registry, dispatcher and FastMCP server."""
