"""Housekeeper: periodic idle-session sweep for the HTTP server.

Idle sessions are closed through their transport so the router's close
subscription removes the store entry; the housekeeper never touches the store
directly.
"""

from __future__ import annotations

import asyncio
from typing import List

from pinata_mcp.logger import Logger
from pinata_mcp.sessions.store import SessionStore


async def sweep_idle_sessions(store: SessionStore, idle_timeout: float, logger: Logger) -> List[str]:
    """Close every session idle for longer than ``idle_timeout`` seconds.

    Returns:
        The ids of the sessions that were closed
    """
    if idle_timeout <= 0:
        return []

    closed: List[str] = []
    for session_id, transport in store.items():
        idle = transport.idle_seconds()
        if idle < idle_timeout:
            continue
        if await transport.close():
            closed.append(session_id)
            logger.info(
                "housekeeper.session_expired",
                session_id=session_id,
                idle_seconds=round(idle, 1),
            )
    return closed


async def run_housekeeper(
    store: SessionStore,
    idle_timeout: float,
    interval: float,
    logger: Logger,
) -> None:
    """Sweep forever; cancel the task to stop."""
    logger.info(
        "housekeeper.started",
        idle_timeout_seconds=idle_timeout,
        interval_seconds=interval,
    )
    while True:
        await asyncio.sleep(max(1.0, interval))
        try:
            closed = await sweep_idle_sessions(store, idle_timeout, logger)
            logger.debug("housekeeper.cycle_ok", closed=len(closed), active=len(store))
        except Exception as e:
            logger.error("housekeeper.cycle_failed", error=str(e), cause=type(e).__name__)
