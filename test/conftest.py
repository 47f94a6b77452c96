"""Pytest configuration and fixtures

Provides shared fixtures for all tests: a Pinata client wired to an
in-process mock of the upstream API, a stub dispatcher for router tests, and
a Starlette app factory.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx
import pytest

# Add project root and this directory to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from mcp.types import CallToolResult, TextContent, Tool

from pinata_mcp.logger import Logger, session_logger
from pinata_mcp.mcp_server import ToolDispatcher, create_app, create_mcp_server
from pinata_mcp.sessions import SessionRouter, SessionStore
from pinata_mcp.upstream import PinataClient


TEST_JWT = "test-pinata-jwt"
TEST_GATEWAY = "example.mypinata.cloud"
TEST_API_KEY = "test-api-key"

SIGNED_URL = "https://example.mypinata.cloud/files/bafyprivate?X-Algorithm=PINATA1&X-Signature=abc"


# ============================================================================
# UPSTREAM MOCK
# ============================================================================


class MockPinata:
    """Routes requests for the Pinata API, uploads host and gateway.

    Every request is recorded. ``responses`` overrides the reply for a
    ``(method, path)`` pair.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.responses: Dict[Any, httpx.Response] = {}
        self.gateway_content = httpx.Response(
            200, text="hello from ipfs", headers={"content-type": "text/plain"}
        )

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key in self.responses:
            return self.responses[key]

        if request.url.host == TEST_GATEWAY:
            return self.gateway_content
        if request.url.host == "uploads.pinata.cloud":
            return httpx.Response(200, json={"data": {"id": "file-1", "cid": "bafyupload"}})
        if request.url.path == "/data/testAuthentication":
            return httpx.Response(
                200, json={"message": "Congratulations! You are communicating with the Pinata API!"}
            )
        if request.url.path == "/v3/files/private/download_link":
            return httpx.Response(200, json={"data": SIGNED_URL})
        return httpx.Response(200, json={"data": {"method": request.method, "path": request.url.path}})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def logger() -> Logger:
    return session_logger


@pytest.fixture
def mock_pinata() -> MockPinata:
    return MockPinata()


@pytest.fixture
def pinata_client(mock_pinata, logger) -> PinataClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(mock_pinata))
    return PinataClient(
        jwt=TEST_JWT,
        gateway_url=TEST_GATEWAY,
        http_client=http_client,
        logger=logger,
    )


@pytest.fixture
def dispatcher(pinata_client, logger) -> ToolDispatcher:
    return ToolDispatcher(pinata_client, logger)


# ============================================================================
# SESSION LAYER
# ============================================================================


class StubDispatcher:
    """Dispatcher double recording calls; ``fail_with`` makes every call raise."""

    def __init__(self, fail_with: Optional[BaseException] = None):
        self.fail_with = fail_with
        self.calls: List[Any] = []

    async def list_tools(self) -> List[Tool]:
        if self.fail_with is not None:
            raise self.fail_with
        return [Tool(name="echo", description="Echo", inputSchema={"type": "object"})]

    async def call_tool(self, name: str, arguments: Dict[str, Any]) -> CallToolResult:
        if self.fail_with is not None:
            raise self.fail_with
        self.calls.append((name, arguments))
        return CallToolResult(content=[TextContent(type="text", text=f"called {name}")])


@pytest.fixture
def stub_dispatcher() -> StubDispatcher:
    return StubDispatcher()


@pytest.fixture
def store(logger) -> SessionStore:
    return SessionStore(logger)


@pytest.fixture
def closed_sessions() -> List[str]:
    return []


@pytest.fixture
def stub_server(stub_dispatcher, logger):
    """Lowlevel MCP server answering from the stub dispatcher."""
    return create_mcp_server(stub_dispatcher, logger)


@pytest.fixture
def router(store, stub_server, logger, closed_sessions) -> SessionRouter:
    """Router over the stub server; tests enter ``router.run()`` themselves."""
    return SessionRouter(
        store=store,
        server=stub_server,
        logger=logger,
        on_session_closed=closed_sessions.append,
    )


# ============================================================================
# HTTP APPLICATION
# ============================================================================


@pytest.fixture
def make_app(pinata_client, logger):
    """Factory so tests can vary auth and session settings."""

    def _make(**kwargs):
        kwargs.setdefault("logger", logger)
        return create_app(pinata_client, **kwargs)

    return _make


@pytest.fixture
def app(make_app):
    return make_app()
