"""Link and gateway tool handlers."""

from __future__ import annotations

import base64
from datetime import datetime, timezone
from typing import Any, Dict

from pinata_mcp.mcp_server.responses import _text
from pinata_mcp.mcp_server.tool_types import ToolResponse
from pinata_mcp.upstream import PinataClient
from pinata_mcp.validation.models import (
    CreateLinkInput,
    CreatePrivateDownloadLinkInput,
    FetchFromGatewayInput,
    Network,
)

# Gateway content above these sizes is summarized instead of inlined
MAX_INLINE_TEXT_BYTES = 100_000
MAX_INLINE_BINARY_BYTES = 50_000

FETCH_LINK_EXPIRES_SECONDS = 600

TEXTUAL_MARKERS = ("json", "javascript", "xml")


def _expiry(date: int, expires: int) -> str:
    moment = datetime.fromtimestamp(date + expires, tz=timezone.utc)
    return f"{moment.strftime('%Y-%m-%d %H:%M:%S UTC')} ({expires} seconds from creation)"


def _is_textual(content_type: str) -> bool:
    return content_type.startswith("text/") or any(m in content_type for m in TEXTUAL_MARKERS)


async def _tool_create_private_download_link(
    client: PinataClient, arguments: Dict[str, Any]
) -> ToolResponse:
    payload = CreatePrivateDownloadLinkInput.model_validate(arguments)
    url, date = await client.create_download_link(payload.cid, payload.expires)
    return _text(
        f"✅ Private download link created!\n\nURL: {url}\n\n"
        f"Expires: {_expiry(date, payload.expires)}"
    )


async def _tool_create_link(client: PinataClient, arguments: Dict[str, Any]) -> ToolResponse:
    payload = CreateLinkInput.model_validate(arguments)
    if payload.network is Network.PUBLIC:
        return _text(f"✅ Public IPFS link:\n{client.public_gateway_url(payload.cid)}")

    url, date = await client.create_download_link(payload.cid, payload.expires)
    return _text(
        f"✅ Private IPFS temporary link:\n{url}\n\n"
        f"Expires: {_expiry(date, payload.expires)}"
    )


async def _tool_fetch_from_gateway(
    client: PinataClient, arguments: Dict[str, Any]
) -> ToolResponse:
    payload = FetchFromGatewayInput.model_validate(arguments)
    if payload.network is Network.PUBLIC:
        file_url = client.public_gateway_url(payload.cid)
    else:
        file_url, _ = await client.create_download_link(payload.cid, FETCH_LINK_EXPIRES_SECONDS)

    response = await client.fetch(file_url)
    content_type = response.headers.get("content-type", "application/octet-stream")
    body = response.content

    text = (
        f"✅ Fetched {len(body)} bytes from {payload.network.value} IPFS (CID: {payload.cid})\n"
        f"Content-Type: {content_type}\n\n"
    )
    if _is_textual(content_type):
        if len(body) < MAX_INLINE_TEXT_BYTES:
            text += f"Content:\n{body.decode('utf-8', errors='replace')}"
        else:
            text += (
                f"Content too large to display ({len(body)} bytes). "
                "Use a smaller file or save to disk."
            )
    elif len(body) < MAX_INLINE_BINARY_BYTES:
        text += f"Base64 Content:\n{base64.b64encode(body).decode('ascii')}"
    else:
        text += f"Binary content too large to display ({len(body)} bytes)."
    return _text(text)
