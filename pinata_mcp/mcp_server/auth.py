"""API-key authentication gate for the HTTP transport.

The gate runs before any session work. It only answers yes or no; the caller
writes the 401 response.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from pinata_mcp.logger import Logger

API_KEY_HEADER = "x-api-key"

UNAUTHORIZED_BODY: Dict[str, Any] = {
    "error": "Unauthorized",
    "message": "Invalid or missing API key",
}


class AuthGate:
    """Checks a presented API key against an immutable allow-set.

    An empty allow-set disables authentication entirely.
    """

    def __init__(self, api_keys: Iterable[str], logger: Logger):
        self._api_keys = frozenset(api_keys)
        self.logger = logger

    @property
    def enabled(self) -> bool:
        return bool(self._api_keys)

    def check(self, presented: Optional[str], client_hint: Optional[str] = None) -> bool:
        """Return True when the request may proceed.

        The presented credential is never logged; only the caller hint is.
        """
        if not self._api_keys:
            return True

        if presented and presented in self._api_keys:
            return True

        self.logger.warning(
            "Unauthorized access attempt",
            client=client_hint or "unknown",
            credential_present=bool(presented),
        )
        return False


def client_hint_from_headers(headers: Any, peer: Optional[str] = None) -> Optional[str]:
    """Best-effort caller identity: first x-forwarded-for hop, else the socket peer."""
    forwarded = headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return peer
