from __future__ import annotations

from typing import Any, Awaitable, Callable, Dict

from mcp.types import CallToolResult

from pinata_mcp.upstream import PinataClient

ToolResponse = CallToolResult
ToolHandler = Callable[[PinataClient, Dict[str, Any]], Awaitable[ToolResponse]]
