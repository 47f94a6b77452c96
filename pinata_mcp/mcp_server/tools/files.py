"""File tool handlers."""

from __future__ import annotations

import base64
import binascii
from typing import Any, Dict

from pinata_mcp.mcp_server.responses import _error, _success
from pinata_mcp.mcp_server.tool_types import ToolResponse
from pinata_mcp.upstream import PinataClient
from pinata_mcp.validation.models import (
    FileIdInput,
    SearchFilesInput,
    UpdateFileInput,
    UploadFileInput,
)

DEFAULT_MIME_TYPE = "application/octet-stream"


async def _tool_search_files(client: PinataClient, arguments: Dict[str, Any]) -> ToolResponse:
    payload = SearchFilesInput.model_validate(arguments)
    data = await client.request_json(
        "GET",
        f"/v3/files/{payload.network.value}",
        action="search files",
        params={
            "name": payload.name,
            "cid": payload.cid,
            "mimeType": payload.mime_type,
            "limit": payload.limit,
            "pageToken": payload.page_token,
        },
    )
    return _success(data)


async def _tool_get_file_by_id(client: PinataClient, arguments: Dict[str, Any]) -> ToolResponse:
    payload = FileIdInput.model_validate(arguments)
    data = await client.request_json(
        "GET", f"/v3/files/{payload.network.value}/{payload.id}", action="get file"
    )
    return _success(data)


async def _tool_update_file(client: PinataClient, arguments: Dict[str, Any]) -> ToolResponse:
    payload = UpdateFileInput.model_validate(arguments)
    body: Dict[str, Any] = {}
    if payload.name:
        body["name"] = payload.name
    if payload.keyvalues:
        body["keyvalues"] = payload.keyvalues
    data = await client.request_json(
        "PUT",
        f"/v3/files/{payload.network.value}/{payload.id}",
        action="update file",
        json_body=body,
    )
    return _success(data)


async def _tool_delete_file(client: PinataClient, arguments: Dict[str, Any]) -> ToolResponse:
    payload = FileIdInput.model_validate(arguments)
    data = await client.request_json(
        "DELETE", f"/v3/files/{payload.network.value}/{payload.id}", action="delete file"
    )
    return _success(data, message="✅ File deleted successfully")


async def _tool_upload_file(client: PinataClient, arguments: Dict[str, Any]) -> ToolResponse:
    payload = UploadFileInput.model_validate(arguments)

    if not payload.file_content:
        if payload.resource_uri:
            return _error(
                "resourceUri is not supported by this server. "
                "Use fileContent with base64-encoded data."
            )
        return _error("fileContent is required (base64-encoded file data)")
    if not payload.file_name:
        return _error("fileName is required when using fileContent")

    try:
        content = base64.b64decode(payload.file_content, validate=True)
    except (binascii.Error, ValueError):
        return _error("fileContent is not valid base64")

    data = await client.upload(
        content,
        file_name=payload.file_name,
        mime_type=payload.mime_type or DEFAULT_MIME_TYPE,
        network=payload.network.value,
        group_id=payload.group_id,
        keyvalues=payload.keyvalues,
    )
    return _success(data, message="✅ File uploaded successfully!")
