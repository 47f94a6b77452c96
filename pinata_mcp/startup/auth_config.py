"""Authentication configuration utilities for the pinata-mcp server.

Resolves the inbound API-key allow-set and the upstream Pinata JWT from CLI
arguments and environment, CLI first.
"""

from typing import FrozenSet, Optional

from pinata_mcp.config import Config
from pinata_mcp.logger import Logger


def parse_api_keys(raw: Optional[str]) -> FrozenSet[str]:
    """Split a comma-separated key list, trimming whitespace and dropping empties."""
    if not raw:
        return frozenset()
    return frozenset(key.strip() for key in raw.split(",") if key.strip())


def resolve_auth_config(
    api_keys_arg: Optional[str],
    require_auth: bool,
    logger: Logger,
) -> FrozenSet[str]:
    """
    Resolve the API-key allow-set used by the authentication gate.

    Args:
        api_keys_arg: Comma-separated keys from CLI argument (or None)
        require_auth: When False, authentication is disabled regardless of keys
        logger: Logger instance for diagnostics

    Returns:
        Frozen allow-set; empty means authentication is disabled
    """
    if not require_auth:
        logger.warning("Authentication disabled by flag (development only)")
        return frozenset()

    source = "cli" if api_keys_arg else "environment"
    api_keys = parse_api_keys(api_keys_arg or Config.get_api_keys_raw())

    if api_keys:
        logger.info("API key authentication enabled", key_count=len(api_keys), source=source)
    else:
        logger.warning("No API keys configured, authentication disabled")
    return api_keys


def resolve_pinata_jwt(jwt_arg: Optional[str], logger: Logger) -> Optional[str]:
    """
    Resolve the upstream Pinata JWT.

    A missing JWT is not fatal at startup: session routing keeps working and
    every tool call reports the missing credential instead.
    """
    jwt = jwt_arg or Config.get_pinata_jwt()
    if not jwt:
        logger.warning("PINATA_JWT is not set, tool calls will fail until it is configured")
    return jwt
