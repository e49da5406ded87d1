"""
Background sweeper for expired sessions.

Reaper.start() schedules a task on the running event loop that sleeps for
`interval` seconds, calls registry.sweep_expired(), and repeats until
stop() cancels it. The sleep never holds the registry lock, and each sweep
is atomic on its own, so cancelling at any point leaves the registry
consistent. A sweep that raises is logged and the loop carries on; the
next interval is the retry.
"""

import asyncio
import logging
import math
from typing import Optional

from registry import Registry

logger = logging.getLogger(__name__)


class Reaper:
    def __init__(self, registry: Registry, interval: float) -> None:
        if not math.isfinite(interval) or interval <= 0:
            raise ValueError(f"Reaper interval must be a positive finite number, got {interval!r}")
        self._registry = registry
        self._interval = interval
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="session-reaper")
        logger.info("Session reaper started (interval=%ss)", self._interval)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Session reaper stopped")

    def sweep_once(self) -> int:
        """Run one sweep, logging instead of raising. Returns users removed."""
        try:
            removed = self._registry.sweep_expired()
        except Exception:
            logger.exception("Session sweep failed, retrying next interval")
            return 0
        return len(removed)

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self._interval)
            self.sweep_once()
