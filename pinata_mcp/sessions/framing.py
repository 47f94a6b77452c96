"""JSON-RPC envelope helpers shared by the router and the session transport."""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, Mapping, Optional, get_args

from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    ClientRequest,
    InitializeRequest,
    JSONRPCRequest,
)
from pydantic import ValidationError
from starlette.responses import JSONResponse, Response

# Session-level codes used by the HTTP transport; the rest come from mcp.types.
SESSION_NOT_FOUND = -32001
SESSION_REQUIRED = -32000

SESSION_ID_HEADER = "mcp-session-id"

SESSION_NOT_FOUND_MESSAGE = (
    "Session not found. Please send an initialize request with the same mcp-session-id header."
)
SESSION_REQUIRED_MESSAGE = "Bad Request: Session ID required or send initialize request"
INTERNAL_ERROR_MESSAGE = "Internal error processing request"

__all__ = [
    "CLIENT_REQUEST_METHODS",
    "INTERNAL_ERROR",
    "INTERNAL_ERROR_MESSAGE",
    "INVALID_PARAMS",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "PARSE_ERROR",
    "SESSION_ID_HEADER",
    "SESSION_NOT_FOUND",
    "SESSION_NOT_FOUND_MESSAGE",
    "SESSION_REQUIRED",
    "SESSION_REQUIRED_MESSAGE",
    "error_envelope",
    "error_response",
    "is_initialize_request",
    "request_id",
]


def _request_methods(union_model: Any) -> FrozenSet[str]:
    methods = set()
    for model in get_args(union_model.model_fields["root"].annotation):
        methods.update(get_args(model.model_fields["method"].annotation))
    return frozenset(methods)


# Every request method a client may send, e.g. "ping", "tools/call".
CLIENT_REQUEST_METHODS = _request_methods(ClientRequest)


def request_id(message: Optional[Mapping[str, Any]]) -> Any:
    """The envelope id to echo, or None."""
    if not isinstance(message, Mapping):
        return None
    value = message.get("id")
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        return value
    return None


def is_initialize_request(message: Optional[Mapping[str, Any]]) -> bool:
    """True only for a well-formed JSON-RPC ``initialize`` request.

    The envelope must carry ``jsonrpc`` and ``id``, and the params must satisfy
    the SDK's ``InitializeRequest`` schema (``protocolVersion``,
    ``capabilities`` and ``clientInfo``).
    """
    if not isinstance(message, Mapping) or message.get("method") != "initialize":
        return False
    try:
        JSONRPCRequest.model_validate(dict(message))
        InitializeRequest.model_validate({"method": "initialize", "params": message.get("params")})
    except ValidationError:
        return False
    return True


def error_envelope(code: int, message: str, id: Any = None) -> Dict[str, Any]:
    return {"jsonrpc": "2.0", "error": {"code": code, "message": message}, "id": id}


def error_response(
    status_code: int,
    code: int,
    message: str,
    id: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    return JSONResponse(error_envelope(code, message, id), status_code=status_code, headers=headers)
