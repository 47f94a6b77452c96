#!/usr/bin/env python3
"""Tests for tool listing and dispatch error handling.

The dispatcher must never raise: every failure becomes an isError result.
"""

import sys
from pathlib import Path

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from pinata_mcp.mcp_server import HANDLERS, ToolDispatcher
from pinata_mcp.upstream import PinataClient


def text_of(result) -> str:
    return result.content[0].text


class TestListTools:
    @pytest.mark.asyncio
    async def test_every_handler_has_a_schema(self, dispatcher):
        tools = await dispatcher.list_tools()

        assert {tool.name for tool in tools} == set(HANDLERS)
        assert len(tools) == 25

    @pytest.mark.asyncio
    async def test_network_parameters_default_to_public(self, dispatcher):
        tools = {tool.name: tool for tool in await dispatcher.list_tools()}

        network = tools["searchFiles"].inputSchema["properties"]["network"]
        assert network["enum"] == ["public", "private"]
        assert network["default"] == "public"

    @pytest.mark.asyncio
    async def test_restricted_handler_table(self, pinata_client, logger):
        dispatcher = ToolDispatcher(
            pinata_client, logger, handlers={"testAuthentication": HANDLERS["testAuthentication"]}
        )

        tools = await dispatcher.list_tools()

        assert [tool.name for tool in tools] == ["testAuthentication"]


class TestCallToolErrors:
    @pytest.mark.asyncio
    async def test_unknown_tool(self, dispatcher):
        result = await dispatcher.call_tool("nope", {})

        assert result.isError is True
        assert text_of(result) == "Error: Unknown tool: nope"

    @pytest.mark.asyncio
    async def test_validation_error_names_missing_field(self, dispatcher, mock_pinata):
        result = await dispatcher.call_tool("getFileById", {})

        assert result.isError is True
        assert "MISSING REQUIRED FIELDS: id" in text_of(result)
        assert mock_pinata.requests == []

    @pytest.mark.asyncio
    async def test_invalid_network_value(self, dispatcher):
        result = await dispatcher.call_tool("searchFiles", {"network": "intranet"})

        assert result.isError is True
        assert "INVALID VALUES: network" in text_of(result)

    @pytest.mark.asyncio
    async def test_missing_jwt(self, mock_pinata, logger):
        client = PinataClient(
            jwt=None, http_client=httpx.AsyncClient(transport=httpx.MockTransport(mock_pinata))
        )
        dispatcher = ToolDispatcher(client, logger)

        result = await dispatcher.call_tool("testAuthentication", {})

        assert result.isError is True
        assert text_of(result) == "Error: PINATA_JWT environment variable is not set"
        assert mock_pinata.requests == []

    @pytest.mark.asyncio
    async def test_upstream_status_error(self, dispatcher, mock_pinata):
        mock_pinata.responses[("GET", "/v3/files/public/f1")] = httpx.Response(404, text="not found")

        result = await dispatcher.call_tool("getFileById", {"id": "f1"})

        assert result.isError is True
        assert text_of(result) == "Error: Failed to get file: 404 Not Found"

    @pytest.mark.asyncio
    async def test_upstream_network_failure(self, logger):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = PinataClient(
            jwt="jwt", http_client=httpx.AsyncClient(transport=httpx.MockTransport(refuse))
        )
        result = await ToolDispatcher(client, logger).call_tool("testAuthentication", {})

        assert result.isError is True
        assert "connection refused" in text_of(result)

    @pytest.mark.asyncio
    async def test_upstream_timeout(self, logger):
        def stall(request):
            raise httpx.ReadTimeout("timed out", request=request)

        client = PinataClient(
            jwt="jwt", http_client=httpx.AsyncClient(transport=httpx.MockTransport(stall))
        )
        result = await ToolDispatcher(client, logger).call_tool("testAuthentication", {})

        assert result.isError is True
        assert "timed out" in text_of(result)

    @pytest.mark.asyncio
    async def test_none_arguments_are_treated_as_empty(self, dispatcher):
        result = await dispatcher.call_tool("testAuthentication", None)

        assert result.isError is False
