"""Custom exceptions for the session layer and the upstream client.

All exceptions carry a stable ``code`` so the router and the tool dispatcher
can translate them into protocol errors.
"""

from pinata_mcp.exceptions.base import ConfigurationError, PinataMcpError, ToolExecutionError
from pinata_mcp.exceptions.session import (
    SessionClosedError,
    SessionError,
    SessionNotFoundError,
    SessionRequiredError,
)
from pinata_mcp.exceptions.upstream import MissingCredentialError, UpstreamError

__all__ = [
    "PinataMcpError",
    "ConfigurationError",
    "ToolExecutionError",
    "SessionError",
    "SessionNotFoundError",
    "SessionRequiredError",
    "SessionClosedError",
    "MissingCredentialError",
    "UpstreamError",
]
