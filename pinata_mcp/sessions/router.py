"""Session router: maps incoming HTTP requests onto session transports.

Resolution order for POST:

1. known ``mcp-session-id``                  -> reuse that transport
2. ``initialize`` with an unknown id          -> forced recovery under that id
3. ``initialize`` without an id               -> fresh session, id from uuid4
4. unknown id on any other message            -> 404 / -32001
5. anything else                              -> 400 / -32000

The router owns a task group (enter ``run()`` from the application lifespan);
each session runs its protocol server as a task inside it.
"""

from __future__ import annotations

import asyncio
import contextlib
import json
from typing import Any, AsyncIterator, Callable, Mapping, Optional, Tuple
from uuid import uuid4

import anyio
from anyio.abc import TaskGroup
from mcp.server import Server
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import Message, Receive, Scope, Send

from pinata_mcp.exceptions import (
    SessionClosedError,
    SessionError,
    SessionNotFoundError,
    SessionRequiredError,
)
from pinata_mcp.logger import Logger
from pinata_mcp.sessions.framing import (
    INTERNAL_ERROR,
    INTERNAL_ERROR_MESSAGE,
    INVALID_REQUEST,
    PARSE_ERROR,
    SESSION_ID_HEADER,
    SESSION_NOT_FOUND,
    SESSION_NOT_FOUND_MESSAGE,
    SESSION_REQUIRED,
    SESSION_REQUIRED_MESSAGE,
    error_response,
    is_initialize_request,
    request_id,
)
from pinata_mcp.sessions.store import SessionStore
from pinata_mcp.sessions.transport import SessionTransport

SessionClosedCallback = Callable[[str], None]


class _ResponseTracker:
    """Wraps the ASGI ``send`` and remembers whether the response has begun."""

    def __init__(self, send: Send):
        self._send = send
        self.started = False

    async def __call__(self, message: Message) -> None:
        if message["type"] == "http.response.start":
            self.started = True
        await self._send(message)


def _replay_body(body: bytes, receive: Receive) -> Receive:
    """A ``receive`` that yields the already-read body once, then defers to ``receive``."""
    pending = True

    async def replay() -> Message:
        nonlocal pending
        if pending:
            pending = False
            return {"type": "http.request", "body": body, "more_body": False}
        return await receive()

    return replay


class SessionRouter:
    def __init__(
        self,
        store: SessionStore,
        server: Server,
        logger: Logger,
        on_session_closed: Optional[SessionClosedCallback] = None,
        serialize_requests: bool = True,
    ):
        self.store = store
        self.server = server
        self.logger = logger
        self.on_session_closed = on_session_closed
        self.serialize_requests = serialize_requests
        self._session_creation_lock = asyncio.Lock()
        self._task_group: Optional[TaskGroup] = None

    @contextlib.asynccontextmanager
    async def run(self) -> AsyncIterator[None]:
        """Own the task group session servers run in; closes every session on exit."""
        if self._task_group is not None:
            raise RuntimeError("Session router is already running")
        async with anyio.create_task_group() as tg:
            self._task_group = tg
            self.logger.info("Session router started")
            try:
                yield
            finally:
                with anyio.CancelScope(shield=True):
                    await self.close_all()
                tg.cancel_scope.cancel()
                self._task_group = None
                self.logger.info("Session router stopped")

    # --------------------------------------------------------------- lifecycle

    def _create_transport(self, session_id: str) -> SessionTransport:
        transport = SessionTransport(
            session_id=session_id,
            server=self.server,
            logger=self.logger,
            on_session_initialized=self._on_initialized,
            serialize_requests=self.serialize_requests,
        )
        transport.subscribe_close(self._on_transport_closed)
        return transport

    async def _start_transport(self, session_id: str) -> SessionTransport:
        if self._task_group is None:
            raise RuntimeError("Session router is not running; enter SessionRouter.run() first")
        transport = self._create_transport(session_id)
        await transport.start(self._task_group)
        return transport

    def _on_initialized(self, transport: SessionTransport) -> None:
        if self.store.get(transport.session_id) is not transport:
            self.store.put(transport.session_id, transport)

    def _on_transport_closed(self, transport: SessionTransport) -> None:
        session_id = transport.session_id
        self.store.remove(session_id, transport)
        if self.on_session_closed is None:
            return
        try:
            self.on_session_closed(session_id)
        except Exception as exc:
            self.logger.error(
                "Session close callback failed",
                session_id=session_id,
                error_type=type(exc).__name__,
                error=str(exc),
            )

    async def close_session(self, session_id: Optional[str]) -> bool:
        transport = self.store.get(session_id)
        if transport is None:
            return False
        return await transport.close()

    async def close_all(self) -> int:
        """Close every live session; returns how many were closed."""
        closed = 0
        for _, transport in self.store.items():
            if await transport.close():
                closed += 1
        if closed:
            self.logger.info("Closed all sessions", count=closed)
        return closed

    # --------------------------------------------------------------- requests

    async def handle_request(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        session_id = request.headers.get(SESSION_ID_HEADER) or None

        if request.method == "DELETE":
            response = await self._handle_delete(session_id)
            await response(scope, receive, send)
            return

        body = await request.body()
        message, rejection = self._parse_body(body)
        if rejection is not None:
            await rejection(scope, receive, send)
            return

        msg_id = request_id(message)
        try:
            transport = await self._resolve(session_id, message)
        except SessionError as exc:
            await _session_error_response(exc, msg_id)(scope, receive, send)
            return

        tracker = _ResponseTracker(send)
        try:
            await transport.handle_message(message, scope, _replay_body(body, receive), tracker)
        except SessionClosedError as exc:
            self.logger.warning("Message reached a closed session", session_id=exc.session_id)
            if not tracker.started:
                await _session_error_response(exc, msg_id)(scope, receive, tracker)
        except Exception as exc:
            self.logger.error(
                "Error handling MCP request",
                session_id=transport.session_id,
                method=message.get("method"),
                error_type=type(exc).__name__,
                error=str(exc),
            )
            if not tracker.started:
                response = error_response(500, INTERNAL_ERROR, INTERNAL_ERROR_MESSAGE, msg_id)
                await response(scope, receive, tracker)
        finally:
            # A session only exists once its initialize handshake succeeded.
            if (
                is_initialize_request(message)
                and not transport.initialized
                and not transport.closed
            ):
                await transport.close()

    def _parse_body(self, body: bytes) -> Tuple[Optional[Mapping[str, Any]], Optional[Response]]:
        if not body.strip():
            return None, JSONResponse(
                {"error": "Bad Request", "message": "Request body is required for MCP protocol"},
                status_code=400,
            )
        try:
            message = json.loads(body)
        except (ValueError, UnicodeDecodeError):
            return None, error_response(400, PARSE_ERROR, "Parse error: invalid JSON")
        if not isinstance(message, dict):
            return None, error_response(
                400, INVALID_REQUEST, "Invalid Request: expected a JSON-RPC object"
            )
        return message, None

    async def _resolve(self, session_id: Optional[str], message: Mapping[str, Any]) -> SessionTransport:
        """Find or create the transport for a POST.

        Only a well-formed ``initialize`` request may create a session.

        Raises:
            SessionNotFoundError: Unknown id on anything but a valid initialize
            SessionRequiredError: No id on anything but a valid initialize
        """
        existing = self.store.get(session_id)
        if existing is not None:
            return existing

        if is_initialize_request(message):
            if session_id:
                return await self._recover(session_id)
            transport = await self._start_transport(uuid4().hex)
            self.logger.debug("Fresh session transport created", session_id=transport.session_id)
            return transport

        if session_id:
            self.logger.warning(
                "Unknown session id", session_id=session_id, method=message.get("method")
            )
            raise SessionNotFoundError(session_id)

        raise SessionRequiredError(method=message.get("method"))

    async def _recover(self, session_id: str) -> SessionTransport:
        """Re-create a session under a client-supplied id."""
        async with self._session_creation_lock:
            existing = self.store.get(session_id)
            if existing is not None:
                return existing
            transport = await self._start_transport(session_id)
            self.store.put(session_id, transport)
            self.logger.info("Session recovered under client-supplied id", session_id=session_id)
            return transport

    async def _handle_delete(self, session_id: Optional[str]) -> Response:
        if not session_id:
            return _session_error_response(SessionRequiredError(method="DELETE"))
        if not await self.close_session(session_id):
            return _session_error_response(SessionNotFoundError(session_id))
        self.logger.info("Session closed by client", session_id=session_id)
        return JSONResponse({"status": "closed", "sessionId": session_id})


def _session_error_response(exc: SessionError, msg_id: Any = None) -> Response:
    if isinstance(exc, SessionRequiredError):
        return error_response(400, SESSION_REQUIRED, SESSION_REQUIRED_MESSAGE, msg_id)
    return error_response(404, SESSION_NOT_FOUND, SESSION_NOT_FOUND_MESSAGE, msg_id)
