"""Group tool handlers."""

from __future__ import annotations

from typing import Any, Dict

from pinata_mcp.mcp_server.responses import _success
from pinata_mcp.mcp_server.tool_types import ToolResponse
from pinata_mcp.upstream import PinataClient
from pinata_mcp.validation.models import (
    CreateGroupInput,
    GroupFileInput,
    GroupIdInput,
    ListGroupsInput,
    UpdateGroupInput,
)


async def _tool_list_groups(client: PinataClient, arguments: Dict[str, Any]) -> ToolResponse:
    payload = ListGroupsInput.model_validate(arguments)
    data = await client.request_json(
        "GET",
        f"/v3/groups/{payload.network.value}",
        action="list groups",
        params={"name": payload.name, "limit": payload.limit, "pageToken": payload.page_token},
    )
    return _success(data)


async def _tool_create_group(client: PinataClient, arguments: Dict[str, Any]) -> ToolResponse:
    payload = CreateGroupInput.model_validate(arguments)
    data = await client.request_json(
        "POST",
        f"/v3/groups/{payload.network.value}",
        action="create group",
        json_body={"name": payload.name},
    )
    return _success(data, message="✅ Group created successfully!")


async def _tool_get_group(client: PinataClient, arguments: Dict[str, Any]) -> ToolResponse:
    payload = GroupIdInput.model_validate(arguments)
    data = await client.request_json(
        "GET", f"/v3/groups/{payload.network.value}/{payload.id}", action="get group"
    )
    return _success(data)


async def _tool_update_group(client: PinataClient, arguments: Dict[str, Any]) -> ToolResponse:
    payload = UpdateGroupInput.model_validate(arguments)
    body: Dict[str, Any] = {}
    if payload.name:
        body["name"] = payload.name
    data = await client.request_json(
        "PUT",
        f"/v3/groups/{payload.network.value}/{payload.id}",
        action="update group",
        json_body=body,
    )
    return _success(data)


async def _tool_delete_group(client: PinataClient, arguments: Dict[str, Any]) -> ToolResponse:
    payload = GroupIdInput.model_validate(arguments)
    data = await client.request_json(
        "DELETE", f"/v3/groups/{payload.network.value}/{payload.id}", action="delete group"
    )
    return _success(data, message="✅ Group deleted successfully")


def _group_member_path(payload: GroupFileInput) -> str:
    return f"/v3/groups/{payload.network.value}/{payload.group_id}/ids/{payload.file_id}"


async def _tool_add_file_to_group(client: PinataClient, arguments: Dict[str, Any]) -> ToolResponse:
    payload = GroupFileInput.model_validate(arguments)
    data = await client.request_json(
        "PUT", _group_member_path(payload), action="add file to group"
    )
    return _success(data, message="✅ File added to group successfully")


async def _tool_remove_file_from_group(
    client: PinataClient, arguments: Dict[str, Any]
) -> ToolResponse:
    payload = GroupFileInput.model_validate(arguments)
    data = await client.request_json(
        "DELETE", _group_member_path(payload), action="remove file from group"
    )
    return _success(data, message="✅ File removed from group successfully")
