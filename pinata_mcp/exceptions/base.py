"""Base exception classes for pinata-mcp.

Every exception carries a stable machine-readable ``code`` alongside the
human-readable message so callers can translate it into a protocol error
without string matching.
"""

from typing import Any, Dict, Optional


class PinataMcpError(Exception):
    """Base class for all project exceptions."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class ConfigurationError(PinataMcpError):
    """Raised when a required setting is missing or invalid."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="CONFIGURATION_ERROR", message=message, details=details)


class ToolExecutionError(PinataMcpError):
    """Raised by the protocol server to report a failed tool call to the SDK."""

    def __init__(self, message: str, tool: Optional[str] = None):
        super().__init__(code="TOOL_ERROR", message=message, details={"tool": tool})


__all__ = ["PinataMcpError", "ConfigurationError", "ToolExecutionError"]
