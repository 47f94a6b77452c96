"""Exceptions raised by the upstream Pinata client."""

from typing import Optional

from pinata_mcp.exceptions.base import PinataMcpError


class MissingCredentialError(PinataMcpError):
    """Raised when a tool needs the Pinata JWT and none was configured."""

    def __init__(self, variable: str = "PINATA_JWT"):
        super().__init__(
            code="MISSING_CREDENTIAL",
            message=f"{variable} environment variable is not set",
            details={"variable": variable},
        )


class UpstreamError(PinataMcpError):
    """Raised when the upstream API answers with a non-success status."""

    def __init__(self, action: str, status_code: int, reason: str, body: Optional[str] = None):
        message = f"Failed to {action}: {status_code} {reason}"
        if body:
            message = f"{message}\n{body}"
        super().__init__(
            code="UPSTREAM_ERROR",
            message=message,
            details={"action": action, "status_code": status_code},
        )
        self.action = action
        self.status_code = status_code
        self.reason = reason
        self.body = body
