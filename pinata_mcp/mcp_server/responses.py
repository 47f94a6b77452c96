"""MCP tool response helpers.

This module holds low-level helpers used by tool handlers and the dispatcher:
- JSON serialization helpers
- success/error result formatting
- Pydantic validation error formatting
"""

from __future__ import annotations

import json
from typing import Any, Optional

from mcp.types import CallToolResult, TextContent
from pydantic import ValidationError as PydanticValidationError


def _json_serializer(obj: Any) -> Any:
    """Custom JSON serializer for non-standard types."""
    # Handle Pydantic models
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json")
    # Handle dataclasses and regular objects
    if hasattr(obj, "__dict__"):
        return obj.__dict__
    # Fallback
    return str(obj)


def _json_dumps(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False, default=_json_serializer)


def _text(text: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)])


def _success(data: Any, message: Optional[str] = None) -> CallToolResult:
    """Pretty-printed upstream JSON, optionally headed by a confirmation line."""
    body = _json_dumps(data)
    if message:
        return _text(f"{message}\n\n{body}")
    return _text(body)


def _error(message: str) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )


def _handle_validation_error(exc: PydanticValidationError) -> CallToolResult:
    errors = exc.errors()

    # Build helpful message based on error types
    missing_fields = [str(e["loc"][0]) for e in errors if e["type"] == "missing" and e["loc"]]
    invalid_fields = [
        ".".join(str(part) for part in e["loc"]) for e in errors if e["type"] != "missing"
    ]

    message = f"Invalid arguments: {len(errors)} error(s) found."
    if missing_fields:
        message += f" MISSING REQUIRED FIELDS: {', '.join(missing_fields)}."
    if invalid_fields:
        message += f" INVALID VALUES: {', '.join(invalid_fields)}."
    message += " Check the tool's inputSchema and retry."
    return _error(message)
