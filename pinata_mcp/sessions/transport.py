"""Per-session state for the HTTP transport.

Each session pairs the SDK's ``StreamableHTTPServerTransport`` (JSON response
mode, session id fixed at construction) with a lowlevel ``Server.run`` task.
Initialize negotiation, ping, ``tools/list`` and ``tools/call`` are answered by
the SDK; this class adds the lifecycle the router needs on top: a one-shot
close subscription, the initialized callback, idle tracking and optional
per-session request serialization.
"""

from __future__ import annotations

import asyncio
import time
from typing import Any, Callable, Dict, List, Mapping, Optional

import anyio
from anyio.abc import TaskGroup, TaskStatus
from mcp.server import Server
from mcp.server.streamable_http import StreamableHTTPServerTransport
from starlette.types import Message, Receive, Scope, Send

from pinata_mcp.exceptions import SessionClosedError
from pinata_mcp.logger import Logger
from pinata_mcp.sessions.framing import (
    CLIENT_REQUEST_METHODS,
    METHOD_NOT_FOUND,
    error_response,
    is_initialize_request,
    request_id,
)

CloseHandler = Callable[["SessionTransport"], None]
InitializedCallback = Callable[["SessionTransport"], None]

# The router has already parsed the body as JSON and every reply is a single
# JSON document, so the SDK transport always sees a conforming client.
_JSON_REQUEST_HEADERS = (
    (b"accept", b"application/json, text/event-stream"),
    (b"content-type", b"application/json"),
)


def _json_scope(scope: Scope) -> Scope:
    headers = [
        (name, value)
        for name, value in scope.get("headers", [])
        if name not in (b"accept", b"content-type")
    ]
    headers.extend(_JSON_REQUEST_HEADERS)
    return {**scope, "headers": headers}


class SessionTransport:
    """One logical MCP session.

    The router owns the lifecycle: it creates the transport, starts its server
    task, registers it in the store and installs the single close
    subscription. ``handle_message`` writes exactly one HTTP response per call.
    """

    def __init__(
        self,
        session_id: str,
        server: Server,
        logger: Logger,
        on_session_initialized: Optional[InitializedCallback] = None,
        serialize_requests: bool = True,
    ):
        self.session_id = session_id
        self.server = server
        self.logger = logger
        self.http = StreamableHTTPServerTransport(
            mcp_session_id=session_id,
            is_json_response_enabled=True,
        )
        self._on_session_initialized = on_session_initialized
        self._lock: Optional[asyncio.Lock] = asyncio.Lock() if serialize_requests else None

        self.initialized = False
        self.closed = False
        self.client_info: Optional[Dict[str, Any]] = None
        self.created_at = time.monotonic()
        self.last_activity = self.created_at

        self._close_handlers: List[CloseHandler] = []
        self._cancel_scope: Optional[anyio.CancelScope] = None

    def idle_seconds(self) -> float:
        return time.monotonic() - self.last_activity

    def touch(self) -> None:
        self.last_activity = time.monotonic()

    # ------------------------------------------------------------------ server

    async def start(self, task_group: TaskGroup) -> None:
        """Run the protocol server for this session inside ``task_group``."""
        await task_group.start(self._run_server)

    async def _run_server(self, *, task_status: TaskStatus = anyio.TASK_STATUS_IGNORED) -> None:
        with anyio.CancelScope() as scope:
            self._cancel_scope = scope
            try:
                async with self.http.connect() as streams:
                    read_stream, write_stream = streams
                    task_status.started()
                    await self.server.run(
                        read_stream,
                        write_stream,
                        self.server.create_initialization_options(),
                        stateless=False,
                    )
            except Exception as exc:
                self.logger.error(
                    "Session server crashed",
                    session_id=self.session_id,
                    error_type=type(exc).__name__,
                    error=str(exc),
                )
        # The server stopped on its own; make sure observers hear about it.
        if not self.closed:
            with anyio.CancelScope(shield=True):
                await self.close()

    # ------------------------------------------------------------------- close

    def subscribe_close(self, handler: CloseHandler) -> None:
        """Register a one-shot close observer."""
        self._close_handlers.append(handler)

    async def close(self) -> bool:
        """Terminate the SDK transport, stop the server task and notify observers.

        Returns:
            False when the transport was already closed
        """
        if self.closed:
            return False
        self.closed = True
        handlers, self._close_handlers = self._close_handlers, []
        try:
            await self.http.terminate()
        finally:
            if self._cancel_scope is not None:
                self._cancel_scope.cancel()
            self.logger.info("Session transport closed", session_id=self.session_id)
            for handler in handlers:
                handler(self)
        return True

    # ---------------------------------------------------------------- messages

    async def handle_message(
        self, message: Mapping[str, Any], scope: Scope, receive: Receive, send: Send
    ) -> None:
        """Answer one POST whose body the router has already parsed into ``message``.

        ``receive`` must replay that body.

        Raises:
            SessionClosedError: The session closed before the message was handled
        """
        if self._lock is None:
            await self._handle(message, scope, receive, send)
            return
        async with self._lock:
            await self._handle(message, scope, receive, send)

    async def _handle(
        self, message: Mapping[str, Any], scope: Scope, receive: Receive, send: Send
    ) -> None:
        if self.closed:
            raise SessionClosedError(self.session_id)

        self.touch()
        method = message.get("method")
        if "id" in message and isinstance(method, str) and method not in CLIENT_REQUEST_METHODS:
            self.logger.warning("Unknown method", session_id=self.session_id, method=method)
            response = error_response(
                200, METHOD_NOT_FOUND, f"Method not found: {method}", request_id(message)
            )
            await response(scope, receive, send)
            return

        initialize = is_initialize_request(message)

        async def forward(event: Message) -> None:
            if event["type"] == "http.response.start":
                if event["status"] == 202:
                    # Notifications are acknowledged with an empty 200.
                    event = {**event, "status": 200}
                elif initialize and event["status"] == 200:
                    self._mark_initialized(message)
            await send(event)

        await self.http.handle_request(_json_scope(scope), receive, forward)

    def _mark_initialized(self, message: Mapping[str, Any]) -> None:
        params = message.get("params") or {}
        client_info = params.get("clientInfo")
        self.client_info = dict(client_info) if isinstance(client_info, Mapping) else None

        first = not self.initialized
        self.initialized = True
        self.logger.info(
            "Session initialized",
            session_id=self.session_id,
            protocol_version=params.get("protocolVersion"),
            client=(self.client_info or {}).get("name"),
        )
        if first and self._on_session_initialized is not None:
            self._on_session_initialized(self)
