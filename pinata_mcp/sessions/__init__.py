"""Session management package."""
from pinata_mcp.sessions.housekeeper import run_housekeeper, sweep_idle_sessions
from pinata_mcp.sessions.router import SessionRouter
from pinata_mcp.sessions.store import SessionStore
from pinata_mcp.sessions.transport import SessionTransport

__all__ = [
    "SessionRouter",
    "SessionStore",
    "SessionTransport",
    "run_housekeeper",
    "sweep_idle_sessions",
]
