"""CID signature tool handlers."""

from __future__ import annotations

from typing import Any, Dict

from pinata_mcp.mcp_server.responses import _success
from pinata_mcp.mcp_server.tool_types import ToolResponse
from pinata_mcp.upstream import PinataClient
from pinata_mcp.validation.models import CidInput, ListSignaturesInput

BASE_PATH = "/v3/ipfs/signature"


async def _tool_sign_cid(client: PinataClient, arguments: Dict[str, Any]) -> ToolResponse:
    payload = CidInput.model_validate(arguments)
    data = await client.request_json(
        "POST",
        BASE_PATH,
        action="sign CID",
        json_body={"cid": payload.cid},
        include_body_in_error=True,
    )
    return _success(data, message="✅ CID signed successfully!")


async def _tool_list_signatures(client: PinataClient, arguments: Dict[str, Any]) -> ToolResponse:
    payload = ListSignaturesInput.model_validate(arguments)
    data = await client.request_json(
        "GET",
        BASE_PATH,
        action="list signatures",
        params={"limit": payload.limit, "pageToken": payload.page_token},
    )
    return _success(data)


async def _tool_get_signature(client: PinataClient, arguments: Dict[str, Any]) -> ToolResponse:
    payload = CidInput.model_validate(arguments)
    data = await client.request_json("GET", f"{BASE_PATH}/{payload.cid}", action="get signature")
    return _success(data)


async def _tool_delete_signature(client: PinataClient, arguments: Dict[str, Any]) -> ToolResponse:
    payload = CidInput.model_validate(arguments)
    data = await client.request_json(
        "DELETE", f"{BASE_PATH}/{payload.cid}", action="delete signature"
    )
    return _success(data, message="✅ Signature deleted successfully")
