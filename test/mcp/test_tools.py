#!/usr/bin/env python3
"""Tests for the individual Pinata tool handlers.

Each test checks the upstream request a tool produces and the text it
returns, against the httpx mock from conftest.
"""

import base64
import json
import sys
from pathlib import Path

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

SIGNED_URL = "https://example.mypinata.cloud/files/bafyprivate?X-Algorithm=PINATA1&X-Signature=abc"


def text_of(result) -> str:
    return result.content[0].text


class TestFiles:
    @pytest.mark.asyncio
    async def test_search_files_drops_unset_filters(self, dispatcher, mock_pinata):
        result = await dispatcher.call_tool(
            "searchFiles", {"network": "private", "name": "report", "limit": 5}
        )

        request = mock_pinata.last
        assert request.method == "GET"
        assert request.url.path == "/v3/files/private"
        assert dict(request.url.params) == {"name": "report", "limit": "5"}
        assert json.loads(text_of(result))["data"]["path"] == "/v3/files/private"

    @pytest.mark.asyncio
    async def test_update_file_sends_only_given_fields(self, dispatcher, mock_pinata):
        await dispatcher.call_tool("updateFile", {"id": "f1", "keyvalues": {"env": "prod"}})

        request = mock_pinata.last
        assert request.method == "PUT"
        assert request.url.path == "/v3/files/public/f1"
        assert json.loads(request.content) == {"keyvalues": {"env": "prod"}}

    @pytest.mark.asyncio
    async def test_delete_file_confirms(self, dispatcher, mock_pinata):
        result = await dispatcher.call_tool("deleteFile", {"id": "f1", "network": "private"})

        assert mock_pinata.last.method == "DELETE"
        assert mock_pinata.last.url.path == "/v3/files/private/f1"
        assert text_of(result).startswith("✅ File deleted successfully")

    @pytest.mark.asyncio
    async def test_upload_file_posts_multipart(self, dispatcher, mock_pinata):
        content = base64.b64encode(b"hello world").decode()

        result = await dispatcher.call_tool(
            "uploadFile",
            {
                "fileContent": content,
                "fileName": "hello.txt",
                "mimeType": "text/plain",
                "group_id": "g1",
                "keyvalues": {"a": "b"},
            },
        )

        request = mock_pinata.last
        assert request.url.host == "uploads.pinata.cloud"
        assert request.url.path == "/v3/files"
        assert request.headers["authorization"] == "Bearer test-pinata-jwt"
        body = request.content
        assert b'filename="hello.txt"' in body
        assert b"hello world" in body
        assert b'name="group_id"' in body
        assert result.isError is False
        assert text_of(result).startswith("✅ File uploaded successfully!")

    @pytest.mark.asyncio
    async def test_upload_refuses_resource_uri(self, dispatcher, mock_pinata):
        result = await dispatcher.call_tool("uploadFile", {"resourceUri": "file:///etc/hosts"})

        assert result.isError is True
        assert "resourceUri is not supported" in text_of(result)
        assert mock_pinata.requests == []

    @pytest.mark.asyncio
    async def test_upload_requires_file_name(self, dispatcher):
        result = await dispatcher.call_tool("uploadFile", {"fileContent": "aGk="})

        assert result.isError is True
        assert "fileName is required" in text_of(result)

    @pytest.mark.asyncio
    async def test_upload_rejects_bad_base64(self, dispatcher):
        result = await dispatcher.call_tool(
            "uploadFile", {"fileContent": "***", "fileName": "x.bin"}
        )

        assert result.isError is True
        assert "not valid base64" in text_of(result)

    @pytest.mark.asyncio
    async def test_upload_error_includes_body(self, dispatcher, mock_pinata):
        mock_pinata.responses[("POST", "/v3/files")] = httpx.Response(400, text="bad group")

        result = await dispatcher.call_tool(
            "uploadFile", {"fileContent": "aGk=", "fileName": "x.txt"}
        )

        assert text_of(result) == "Error: Failed to upload file: 400 Bad Request\nbad group"


class TestLinks:
    @pytest.mark.asyncio
    async def test_public_link_uses_gateway(self, dispatcher, mock_pinata):
        result = await dispatcher.call_tool("createLink", {"cid": "bafypublic"})

        assert "https://example.mypinata.cloud/ipfs/bafypublic" in text_of(result)
        assert mock_pinata.requests == []

    @pytest.mark.asyncio
    async def test_private_link_requests_signed_url(self, dispatcher, mock_pinata):
        result = await dispatcher.call_tool(
            "createLink", {"cid": "bafyprivate", "network": "private", "expires": 120}
        )

        payload = json.loads(mock_pinata.last.content)
        assert payload["url"] == "https://example.mypinata.cloud/files/bafyprivate"
        assert payload["expires"] == 120
        assert payload["method"] == "GET"
        assert SIGNED_URL in text_of(result)
        assert "(120 seconds from creation)" in text_of(result)

    @pytest.mark.asyncio
    async def test_private_download_link_default_expiry(self, dispatcher, mock_pinata):
        result = await dispatcher.call_tool("createPrivateDownloadLink", {"cid": "bafyprivate"})

        assert json.loads(mock_pinata.last.content)["expires"] == 600
        assert text_of(result).startswith("✅ Private download link created!")

    @pytest.mark.asyncio
    async def test_links_need_gateway(self, mock_pinata, logger):
        from pinata_mcp.mcp_server import ToolDispatcher
        from pinata_mcp.upstream import PinataClient

        client = PinataClient(
            jwt="jwt", http_client=httpx.AsyncClient(transport=httpx.MockTransport(mock_pinata))
        )
        result = await ToolDispatcher(client, logger).call_tool("createLink", {"cid": "c"})

        assert result.isError is True
        assert text_of(result) == "Error: GATEWAY_URL environment variable is not set"

    @pytest.mark.asyncio
    async def test_fetch_text_content(self, dispatcher, mock_pinata):
        result = await dispatcher.call_tool("fetchFromGateway", {"cid": "bafypublic"})

        assert mock_pinata.last.url.host == "example.mypinata.cloud"
        assert mock_pinata.last.url.path == "/ipfs/bafypublic"
        assert "Content:\nhello from ipfs" in text_of(result)

    @pytest.mark.asyncio
    async def test_fetch_binary_content_is_base64(self, dispatcher, mock_pinata):
        mock_pinata.gateway_content = httpx.Response(
            200, content=b"\x00\x01\x02", headers={"content-type": "application/octet-stream"}
        )

        result = await dispatcher.call_tool("fetchFromGateway", {"cid": "bafybin"})

        assert "Base64 Content:\nAAEC" in text_of(result)

    @pytest.mark.asyncio
    async def test_fetch_large_text_is_summarized(self, dispatcher, mock_pinata):
        mock_pinata.gateway_content = httpx.Response(
            200, text="x" * 100_000, headers={"content-type": "text/plain"}
        )

        result = await dispatcher.call_tool("fetchFromGateway", {"cid": "bafybig"})

        assert "Content too large to display (100000 bytes)" in text_of(result)

    @pytest.mark.asyncio
    async def test_fetch_private_goes_through_signed_url(self, dispatcher, mock_pinata):
        await dispatcher.call_tool("fetchFromGateway", {"cid": "bafyprivate", "network": "private"})

        paths = [r.url.path for r in mock_pinata.requests]
        assert paths == ["/v3/files/private/download_link", "/files/bafyprivate"]


class TestGroups:
    @pytest.mark.asyncio
    async def test_create_group(self, dispatcher, mock_pinata):
        result = await dispatcher.call_tool("createGroup", {"name": "photos"})

        assert mock_pinata.last.method == "POST"
        assert mock_pinata.last.url.path == "/v3/groups/public"
        assert json.loads(mock_pinata.last.content) == {"name": "photos"}
        assert text_of(result).startswith("✅ Group created successfully!")

    @pytest.mark.asyncio
    async def test_add_and_remove_file(self, dispatcher, mock_pinata):
        await dispatcher.call_tool("addFileToGroup", {"groupId": "g1", "fileId": "f1"})
        await dispatcher.call_tool(
            "removeFileFromGroup", {"groupId": "g1", "fileId": "f1", "network": "private"}
        )

        first, second = mock_pinata.requests
        assert (first.method, first.url.path) == ("PUT", "/v3/groups/public/g1/ids/f1")
        assert (second.method, second.url.path) == ("DELETE", "/v3/groups/private/g1/ids/f1")


class TestPaymentInstructions:
    @pytest.mark.asyncio
    async def test_create_payment_instruction(self, dispatcher, mock_pinata):
        requirement = {
            "asset": "0xUSDC",
            "pay_to": "0xWallet",
            "network": "base",
            "amount": "1000",
        }

        result = await dispatcher.call_tool(
            "createPaymentInstruction",
            {"name": "paywall", "payment_requirements": [requirement]},
        )

        assert mock_pinata.last.url.path == "/v3/x402/payment_instructions"
        sent = json.loads(mock_pinata.last.content)
        assert sent["name"] == "paywall"
        assert sent["payment_requirements"][0]["pay_to"] == "0xWallet"
        assert result.isError is False

    @pytest.mark.asyncio
    async def test_invalid_payment_network(self, dispatcher):
        result = await dispatcher.call_tool(
            "createPaymentInstruction",
            {
                "name": "paywall",
                "payment_requirements": [
                    {"asset": "a", "pay_to": "b", "network": "ethereum", "amount": "1"}
                ],
            },
        )

        assert result.isError is True


class TestSignatures:
    @pytest.mark.asyncio
    async def test_sign_cid(self, dispatcher, mock_pinata):
        result = await dispatcher.call_tool("signCid", {"cid": "bafy1"})

        assert mock_pinata.last.method == "POST"
        assert mock_pinata.last.url.path == "/v3/ipfs/signature"
        assert json.loads(mock_pinata.last.content) == {"cid": "bafy1"}
        assert text_of(result).startswith("✅ CID signed successfully!")

    @pytest.mark.asyncio
    async def test_delete_signature(self, dispatcher, mock_pinata):
        await dispatcher.call_tool("deleteSignature", {"cid": "bafy1"})

        assert mock_pinata.last.method == "DELETE"
        assert mock_pinata.last.url.path == "/v3/ipfs/signature/bafy1"
