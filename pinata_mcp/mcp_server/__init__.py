"""MCP server package: tool dispatch plus the HTTP and stdio front ends."""

from pinata_mcp.mcp_server.routing import HANDLERS, ToolDispatcher
from pinata_mcp.mcp_server.protocol import create_mcp_server
from pinata_mcp.mcp_server.server import create_app, run_http

__all__ = ["HANDLERS", "ToolDispatcher", "create_app", "create_mcp_server", "run_http"]
