"""Console logger backed by the standard logging module."""

import logging
import sys
from typing import Any

from .base import Logger


class ConsoleLogger(Logger):
    """Writes ``message key=value ...`` lines to stderr.

    stdout is reserved for the stdio transport, so nothing here ever writes to it.
    """

    def __init__(self, name: str = "pinata_mcp", level: int = logging.INFO):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level)
        if not self._logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            )
            self._logger.addHandler(handler)
        self._logger.propagate = False

    @staticmethod
    def _format(message: str, kwargs: dict) -> str:
        if not kwargs:
            return message
        context = " ".join(f"{key}={value!r}" for key, value in kwargs.items())
        return f"{message} | {context}"

    def debug(self, message: str, **kwargs: Any) -> None:
        self._logger.debug(self._format(message, kwargs))

    def info(self, message: str, **kwargs: Any) -> None:
        self._logger.info(self._format(message, kwargs))

    def warning(self, message: str, **kwargs: Any) -> None:
        self._logger.warning(self._format(message, kwargs))

    def error(self, message: str, **kwargs: Any) -> None:
        self._logger.error(self._format(message, kwargs))

    def critical(self, message: str, **kwargs: Any) -> None:
        self._logger.critical(self._format(message, kwargs))
