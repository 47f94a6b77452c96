"""HTTP client for the Pinata REST API and its dedicated gateway.

Every call has a bounded timeout so a stalled upstream cannot leave a session
request suspended indefinitely.
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Optional, Tuple

import httpx

from pinata_mcp.config import (
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    PINATA_API_URL,
    PINATA_UPLOADS_URL,
)
from pinata_mcp.exceptions import ConfigurationError, MissingCredentialError, UpstreamError
from pinata_mcp.logger import Logger, session_logger


def _clean_params(params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Drop unset query parameters; only truthy values reach the wire."""
    if not params:
        return {}
    return {key: value for key, value in params.items() if value}


def _normalize_gateway(gateway_url: Optional[str]) -> Optional[str]:
    if not gateway_url:
        return None
    host = gateway_url.strip()
    for prefix in ("https://", "http://"):
        if host.startswith(prefix):
            host = host[len(prefix):]
    return host.rstrip("/") or None


class PinataClient:
    """Thin async wrapper around ``httpx.AsyncClient`` for Pinata endpoints."""

    def __init__(
        self,
        jwt: Optional[str],
        gateway_url: Optional[str] = None,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        http_client: Optional[httpx.AsyncClient] = None,
        api_url: str = PINATA_API_URL,
        uploads_url: str = PINATA_UPLOADS_URL,
        logger: Optional[Logger] = None,
    ):
        """
        Args:
            jwt: Pinata bearer credential; None makes every authenticated call fail
            gateway_url: Dedicated gateway host used for links and fetches
            timeout: Per-request timeout in seconds
            http_client: Pre-built client (tests inject one with a mock transport)
            api_url: Base URL of the REST API
            uploads_url: Base URL of the upload API
            logger: Logger instance
        """
        self.jwt = jwt
        self.gateway_url = _normalize_gateway(gateway_url)
        self.api_url = api_url.rstrip("/")
        self.uploads_url = uploads_url.rstrip("/")
        self.logger = logger or session_logger
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    def _headers(self, json_body: bool = True) -> Dict[str, str]:
        if not self.jwt:
            raise MissingCredentialError("PINATA_JWT")
        headers = {"Authorization": f"Bearer {self.jwt}"}
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _require_gateway(self) -> str:
        if not self.gateway_url:
            raise ConfigurationError("GATEWAY_URL environment variable is not set")
        return self.gateway_url

    @staticmethod
    def _raise_for_status(response: httpx.Response, action: str, include_body: bool) -> None:
        if response.is_success:
            return
        body = response.text if include_body else None
        raise UpstreamError(action, response.status_code, response.reason_phrase, body)

    async def request_json(
        self,
        method: str,
        path: str,
        action: str,
        params: Optional[Dict[str, Any]] = None,
        json_body: Optional[Dict[str, Any]] = None,
        include_body_in_error: bool = False,
    ) -> Any:
        """Call ``{api_url}{path}`` and return the decoded JSON body.

        Raises:
            MissingCredentialError: If no JWT is configured
            UpstreamError: On any non-2xx status
            httpx.HTTPError: On network failures and timeouts
        """
        url = f"{self.api_url}{path}"
        self.logger.debug("Upstream request", method=method, url=url, action=action)
        response = await self._http.request(
            method,
            url,
            headers=self._headers(),
            params=_clean_params(params),
            json=json_body,
        )
        self._raise_for_status(response, action, include_body_in_error)
        return response.json()

    async def upload(
        self,
        content: bytes,
        file_name: str,
        mime_type: str,
        network: str = "public",
        group_id: Optional[str] = None,
        keyvalues: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Upload raw bytes as a multipart form to the uploads endpoint."""
        data: Dict[str, str] = {"network": network}
        if group_id:
            data["group_id"] = group_id
        if keyvalues:
            data["keyvalues"] = json.dumps(keyvalues)

        url = f"{self.uploads_url}/v3/files"
        self.logger.debug("Upstream upload", url=url, file_name=file_name, size=len(content))
        response = await self._http.post(
            url,
            headers=self._headers(json_body=False),
            files={"file": (file_name, content, mime_type)},
            data=data,
        )
        self._raise_for_status(response, "upload file", include_body=True)
        return response.json()

    def public_gateway_url(self, cid: str) -> str:
        return f"https://{self._require_gateway()}/ipfs/{cid}"

    async def create_download_link(self, cid: str, expires: int) -> Tuple[str, int]:
        """Request a temporary signed link for a private file.

        Returns:
            Tuple of (signed_url, creation_epoch_seconds)
        """
        gateway = self._require_gateway()
        date = int(time.time())
        payload = {
            "url": f"https://{gateway}/files/{cid}",
            "expires": expires,
            "date": date,
            "method": "GET",
        }
        data = await self.request_json(
            "POST",
            "/v3/files/private/download_link",
            action="create download link",
            json_body=payload,
            include_body_in_error=True,
        )
        return data["data"], date

    async def fetch(self, url: str) -> httpx.Response:
        """GET a gateway URL without credentials."""
        response = await self._http.get(url, follow_redirects=True)
        self._raise_for_status(response, "fetch file", include_body=False)
        return response

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()
