"""
Logger module for pinata-mcp

This module provides a small structured logging interface so that components
receive a logger by injection and can attach context as keyword arguments.

Usage:
    from pinata_mcp.logger import Logger, ConsoleLogger

    # Use the shared logger
    from pinata_mcp.logger import session_logger
    session_logger.info("Session created", session_id=session_id)

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            # Your custom implementation
            pass
"""

import logging
import os

from .base import Logger
from .console_logger import ConsoleLogger


def _level_from_env() -> int:
    name = os.environ.get("PINATA_MCP_LOG_LEVEL", "INFO").upper()
    return getattr(logging, name, logging.INFO)


# Shared logger instance for modules that just need basic console logging
session_logger: Logger = ConsoleLogger(level=_level_from_env())

__all__ = [
    "Logger",
    "ConsoleLogger",
    "session_logger",
]
