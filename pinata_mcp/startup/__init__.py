"""Startup utilities for pinata-mcp entry points."""

from .auth_config import parse_api_keys, resolve_auth_config, resolve_pinata_jwt

__all__ = ["parse_api_keys", "resolve_auth_config", "resolve_pinata_jwt"]
