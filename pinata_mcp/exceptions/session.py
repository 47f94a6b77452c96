"""Session-related exceptions."""

from typing import Any, Dict, Optional

from pinata_mcp.exceptions.base import PinataMcpError


class SessionError(PinataMcpError):
    """Base exception for session-related errors."""

    pass


class SessionNotFoundError(SessionError):
    """Raised when a request names a session the store does not hold."""

    def __init__(self, session_id: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            code="SESSION_NOT_FOUND",
            message=f"Session '{session_id}' not found",
            details=details or {},
        )
        self.session_id = session_id


class SessionRequiredError(SessionError):
    """Raised when a non-initialize request arrives without a session id."""

    def __init__(self, method: Optional[str] = None):
        super().__init__(
            code="SESSION_REQUIRED",
            message="Session ID required or send initialize request",
            details={"method": method},
        )


class SessionClosedError(SessionError):
    """Raised when a message reaches a transport that has already closed."""

    def __init__(self, session_id: str):
        super().__init__(
            code="SESSION_CLOSED",
            message=f"Session '{session_id}' has been closed",
            details={},
        )
        self.session_id = session_id
