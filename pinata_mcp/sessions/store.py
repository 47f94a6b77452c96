"""In-memory session store: session id -> live transport."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple

from pinata_mcp.logger import Logger

if TYPE_CHECKING:
    from pinata_mcp.sessions.transport import SessionTransport


class SessionStore:
    """Keyed map of live session transports.

    One instance per router; nothing module-level, so independent stores can
    coexist in one process. Access is from the event loop only.
    """

    def __init__(self, logger: Logger) -> None:
        self._transports: Dict[str, "SessionTransport"] = {}
        self.logger = logger

    def get(self, session_id: Optional[str]) -> Optional["SessionTransport"]:
        if not session_id:
            return None
        return self._transports.get(session_id)

    def put(self, session_id: Optional[str], transport: "SessionTransport") -> None:
        """Insert or overwrite. Empty ids are not registered."""
        if not session_id:
            self.logger.debug("Session-less transport not registered")
            return
        previous = self._transports.get(session_id)
        self._transports[session_id] = transport
        if previous is not None and previous is not transport:
            self.logger.warning("Session entry replaced", session_id=session_id)
        else:
            self.logger.debug("Session registered", session_id=session_id, active=len(self))

    def remove(self, session_id: Optional[str], transport: Optional["SessionTransport"] = None) -> bool:
        """Idempotent delete.

        With ``transport`` given, the entry is only removed while it still
        points at that transport, so a stale transport's closure cannot evict
        the session that replaced it.

        Returns:
            True if an entry was removed
        """
        if not session_id:
            return False
        current = self._transports.get(session_id)
        if current is None:
            return False
        if transport is not None and current is not transport:
            return False
        del self._transports[session_id]
        self.logger.debug("Session removed", session_id=session_id, active=len(self))
        return True

    def session_ids(self) -> List[str]:
        return list(self._transports.keys())

    def items(self) -> List[Tuple[str, "SessionTransport"]]:
        """Snapshot, safe to iterate while sessions close."""
        return list(self._transports.items())

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._transports

    def __len__(self) -> int:
        return len(self._transports)

    def __iter__(self) -> Iterator[str]:
        return iter(self.session_ids())
