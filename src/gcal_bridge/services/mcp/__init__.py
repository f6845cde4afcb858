"""MCP tool server for agent hosts."""

from .server import build_mcp_server, run_mcp_server, serve_mcp_stdio, server

__all__ = ["build_mcp_server", "run_mcp_server", "serve_mcp_stdio", "server"]
