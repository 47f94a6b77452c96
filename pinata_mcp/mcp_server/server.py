"""Starlette application and uvicorn runner for the HTTP MCP server."""

from __future__ import annotations

import asyncio
import contextlib
from typing import AsyncIterator, Callable, Iterable, Optional

from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route
from starlette.types import Receive, Scope, Send

from pinata_mcp.config import DEFAULT_HOUSEKEEPING_INTERVAL_SECONDS, SERVER_NAME
from pinata_mcp.logger import Logger, session_logger
from pinata_mcp.mcp_server.auth import (
    API_KEY_HEADER,
    UNAUTHORIZED_BODY,
    AuthGate,
    client_hint_from_headers,
)
from pinata_mcp.mcp_server.protocol import create_mcp_server
from pinata_mcp.mcp_server.routing import ToolDispatcher
from pinata_mcp.sessions import SessionRouter, SessionStore, run_housekeeper
from pinata_mcp.upstream import PinataClient

# Methods that reach the session router and therefore require a credential.
PROTECTED_METHODS = frozenset({"POST", "DELETE"})


class ApiKeyMiddleware(BaseHTTPMiddleware):
    """Reject protected requests that do not carry an allowed ``x-api-key``."""

    def __init__(self, app, gate: AuthGate):
        super().__init__(app)
        self.gate = gate

    async def dispatch(self, request, call_next):
        if request.method in PROTECTED_METHODS:
            peer = request.client.host if request.client else None
            hint = client_hint_from_headers(request.headers, peer)
            if not self.gate.check(request.headers.get(API_KEY_HEADER), client_hint=hint):
                return JSONResponse(UNAUTHORIZED_BODY, status_code=401)
        return await call_next(request)


class MCPEndpoint:
    """ASGI endpoint handing POST and DELETE on ``/`` to the session router."""

    def __init__(self, router: SessionRouter):
        self.router = router

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        await self.router.handle_request(scope, receive, send)


def create_app(
    client: PinataClient,
    api_keys: Iterable[str] = (),
    logger: Logger = session_logger,
    session_idle_timeout: float = 0,
    housekeeping_interval: float = DEFAULT_HOUSEKEEPING_INTERVAL_SECONDS,
    serialize_requests: bool = True,
    on_session_closed: Optional[Callable[[str], None]] = None,
) -> Starlette:
    """Build the HTTP application.

    The store, router and auth gate are exposed on ``app.state`` so callers and
    tests can inspect live sessions.
    """
    store = SessionStore(logger)
    dispatcher = ToolDispatcher(client, logger)
    mcp_server = create_mcp_server(dispatcher, logger)
    router = SessionRouter(
        store=store,
        server=mcp_server,
        logger=logger,
        on_session_closed=on_session_closed,
        serialize_requests=serialize_requests,
    )
    gate = AuthGate(api_keys, logger)

    async def health(request: Request) -> JSONResponse:
        return JSONResponse({"status": "ok", "server": SERVER_NAME, "sessions": len(store)})

    @contextlib.asynccontextmanager
    async def lifespan(starlette_app) -> AsyncIterator[None]:
        logger.info(
            "Starting MCP HTTP server",
            auth_enabled=gate.enabled,
            serialize_requests=serialize_requests,
            session_idle_timeout=session_idle_timeout,
        )
        housekeeper: Optional[asyncio.Task] = None
        try:
            async with router.run():
                if session_idle_timeout > 0:
                    housekeeper = asyncio.create_task(
                        run_housekeeper(store, session_idle_timeout, housekeeping_interval, logger)
                    )
                try:
                    yield
                finally:
                    if housekeeper is not None:
                        housekeeper.cancel()
                        with contextlib.suppress(asyncio.CancelledError):
                            await housekeeper
        finally:
            await client.aclose()
            logger.info("MCP HTTP server stopped")

    endpoint = MCPEndpoint(router)
    app = Starlette(
        debug=False,
        routes=[
            Route("/", health, methods=["GET"]),
            Route("/ping", health, methods=["GET"]),
            Route("/", endpoint, methods=["POST", "DELETE"]),
        ],
        middleware=[
            Middleware(
                CORSMiddleware,
                allow_origins=["*"],
                allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
                allow_headers=["*"],
                expose_headers=["Mcp-Session-Id"],
            ),
            Middleware(ApiKeyMiddleware, gate=gate),
        ],
        lifespan=lifespan,
    )
    app.state.store = store
    app.state.router = router
    app.state.auth_gate = gate
    app.state.dispatcher = dispatcher
    app.state.mcp_server = mcp_server
    return app


async def run_http(app: Starlette, host: str = "0.0.0.0", port: int = 3000) -> None:
    import uvicorn

    session_logger.info("Starting Pinata MCP server", host=host, port=port)
    config = uvicorn.Config(app, host=host, port=port, log_level="info")
    server = uvicorn.Server(config)
    await server.serve()
