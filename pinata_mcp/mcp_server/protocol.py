"""The MCP protocol engine shared by the HTTP and stdio front ends.

Both transports run the SDK's lowlevel ``Server``; this module wires its
``tools/list`` and ``tools/call`` handlers to a ``ToolDispatcher``.
"""

from __future__ import annotations

from typing import Any, Dict, List

from mcp.server import Server
from mcp.types import ContentBlock, Tool

from pinata_mcp.config import SERVER_NAME, SERVER_VERSION
from pinata_mcp.exceptions import ToolExecutionError
from pinata_mcp.logger import Logger, session_logger
from pinata_mcp.mcp_server.routing import ToolDispatcher


def create_mcp_server(dispatcher: ToolDispatcher, logger: Logger = session_logger) -> Server:
    app: Server = Server(SERVER_NAME, version=SERVER_VERSION)

    @app.list_tools()
    async def handle_list_tools() -> List[Tool]:
        return await dispatcher.list_tools()

    @app.call_tool()
    async def handle_call_tool(name: str, arguments: Dict[str, Any]) -> List[ContentBlock]:
        result = await dispatcher.call_tool(name, arguments)
        if result.isError:
            # The SDK turns a raised exception into an isError result.
            text = "".join(getattr(block, "text", "") for block in result.content)
            logger.debug("Tool returned an error result", tool=name)
            raise ToolExecutionError(text, tool=name)
        return list(result.content)

    return app
