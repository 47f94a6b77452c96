"""Account tool handlers."""

from __future__ import annotations

from typing import Any, Dict

from pinata_mcp.mcp_server.responses import _success
from pinata_mcp.mcp_server.tool_types import ToolResponse
from pinata_mcp.upstream import PinataClient


async def _tool_test_authentication(client: PinataClient, arguments: Dict[str, Any]) -> ToolResponse:
    data = await client.request_json(
        "GET", "/data/testAuthentication", action="authenticate"
    )
    return _success(data, message="✅ Authentication successful!")
