"""MCP server over stdio.

One process serves one client, so there is no session routing here: the same
lowlevel ``Server`` that backs every HTTP session talks to stdin and stdout.
"""

from __future__ import annotations

from mcp.server import Server
from mcp.server.stdio import stdio_server

from pinata_mcp.logger import Logger, session_logger
from pinata_mcp.mcp_server.protocol import create_mcp_server
from pinata_mcp.mcp_server.routing import ToolDispatcher
from pinata_mcp.upstream import PinataClient


def create_stdio_server(client: PinataClient, logger: Logger = session_logger) -> Server:
    return create_mcp_server(ToolDispatcher(client, logger), logger)


async def main(client: PinataClient, logger: Logger = session_logger) -> None:
    app = create_stdio_server(client, logger)
    logger.info("Pinata MCP server running on stdio")
    try:
        async with stdio_server() as (read_stream, write_stream):
            await app.run(read_stream, write_stream, app.create_initialization_options())
    finally:
        await client.aclose()
