"""Centralized configuration and defaults for the pinata-mcp service.

All settings are read from the environment once at process start. CLI
arguments in the entry points take precedence over these values.
"""

import os
from typing import Optional

from pinata_mcp.logger import session_logger as logger

# =============================================================================
# ENVIRONMENT VARIABLES REFERENCE
# =============================================================================

# Upstream
# --------
# PINATA_JWT: Bearer credential for the Pinata API (required for tool calls;
#   session routing keeps working without it)
# GATEWAY_URL: Dedicated gateway host, e.g. example.mypinata.cloud
#   Used for: createLink, createPrivateDownloadLink, fetchFromGateway
# PINATA_MCP_HTTP_TIMEOUT: Upstream request timeout in seconds (default: 30)
#
# Server
# ------
# PINATA_MCP_HOST: Bind address (default: 0.0.0.0)
# PINATA_MCP_PORT: HTTP port (default: 3000)
#
# Authentication
# --------------
# MCP_API_KEYS: Comma-separated allow-list for the x-api-key header.
#   Empty or unset disables authentication.
#
# Sessions
# --------
# PINATA_MCP_SESSION_IDLE_TIMEOUT_SECONDS: Close sessions idle for longer than
#   this (default: 0, never)
# PINATA_MCP_HOUSEKEEPING_INTERVAL_SECONDS: Idle sweep interval (default: 60)
#
# Development
# -----------
# PINATA_MCP_LOG_LEVEL: Logging verbosity (default: INFO)
#   Values: DEBUG, INFO, WARNING, ERROR, CRITICAL

# =============================================================================
# CONFIGURATION DEFAULTS
# =============================================================================

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_HTTP_TIMEOUT_SECONDS = 30.0
DEFAULT_SESSION_IDLE_TIMEOUT_SECONDS = 0
DEFAULT_HOUSEKEEPING_INTERVAL_SECONDS = 60

SERVER_NAME = "mcp-pinata"
SERVER_VERSION = "1.0.0"

PINATA_API_URL = "https://api.pinata.cloud"
PINATA_UPLOADS_URL = "https://uploads.pinata.cloud"


def _env_str(name: str) -> Optional[str]:
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return None
    return value.strip()


def _env_number(name: str, default: float, minimum: float = 0) -> float:
    """Parse a number >= ``minimum`` from the environment, falling back to ``default``."""
    raw = _env_str(name)
    if raw is None:
        return default

    try:
        value = float(raw)
        if value < minimum:
            raise ValueError(f"must be >= {minimum}")
        return value
    except ValueError:
        logger.warning(
            "config.invalid_env",
            variable=name,
            provided_value=raw,
            default_value=default,
        )
        return default


class Config:
    """Read-only accessors over the process environment."""

    @staticmethod
    def get_pinata_jwt() -> Optional[str]:
        return _env_str("PINATA_JWT")

    @staticmethod
    def get_gateway_url() -> Optional[str]:
        return _env_str("GATEWAY_URL")

    @staticmethod
    def get_api_keys_raw() -> Optional[str]:
        return _env_str("MCP_API_KEYS")

    @staticmethod
    def get_host() -> str:
        return _env_str("PINATA_MCP_HOST") or DEFAULT_HOST

    @staticmethod
    def get_port() -> int:
        return int(_env_number("PINATA_MCP_PORT", DEFAULT_PORT, minimum=1))

    @staticmethod
    def get_http_timeout() -> float:
        return _env_number("PINATA_MCP_HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT_SECONDS, minimum=0.1)

    @staticmethod
    def get_session_idle_timeout() -> float:
        return _env_number(
            "PINATA_MCP_SESSION_IDLE_TIMEOUT_SECONDS", DEFAULT_SESSION_IDLE_TIMEOUT_SECONDS
        )

    @staticmethod
    def get_housekeeping_interval() -> float:
        return _env_number(
            "PINATA_MCP_HOUSEKEEPING_INTERVAL_SECONDS",
            DEFAULT_HOUSEKEEPING_INTERVAL_SECONDS,
            minimum=1,
        )


def get_config_summary() -> dict:
    """Get a summary of current configuration from environment.

    Secrets are reported as present/absent only.
    """
    return {
        "host": Config.get_host(),
        "port": Config.get_port(),
        "pinata_jwt_configured": Config.get_pinata_jwt() is not None,
        "gateway_url": Config.get_gateway_url(),
        "api_keys_configured": Config.get_api_keys_raw() is not None,
        "http_timeout": Config.get_http_timeout(),
        "session_idle_timeout": Config.get_session_idle_timeout(),
        "housekeeping_interval": Config.get_housekeeping_interval(),
    }
