"""Upstream Pinata API client package."""

from pinata_mcp.upstream.client import PinataClient

__all__ = ["PinataClient"]
