"""
Shutdown coordination.

Ctrl+C (or the Exit menu entry) only posts a request here. The event
loop checks `requested` once per tick and then awaits `shutdown()`,
which stops every active forward before the exit callback runs.
"""

import asyncio
from typing import Awaitable, Callable, Optional, Union

from .errors import ForwardingError
from .logging_config import get_logger
from .protocols import ForwardingEngine

logger = get_logger("shutdown")

ExitCallback = Callable[[], Union[None, Awaitable[None]]]


class ShutdownCoordinator:
    """Collects shutdown requests and performs the orderly stop."""

    def __init__(self, engine: ForwardingEngine, on_exit: Optional[ExitCallback] = None):
        self.engine = engine
        self.on_exit = on_exit
        self._requested = asyncio.Event()
        self._done = False

    @property
    def requested(self) -> bool:
        return self._requested.is_set()

    @property
    def done(self) -> bool:
        return self._done

    def request(self) -> None:
        """Post a shutdown request. Safe to call repeatedly."""
        if not self.requested:
            logger.info("Shutdown requested")
        self._requested.set()

    async def shutdown(self) -> None:
        """Stop all forwards, then run the exit callback. Runs once."""
        if self._done:
            return
        self._done = True
        logger.info("Stopping all port forwards")
        try:
            await self.engine.stop_all()
        except ForwardingError as e:
            logger.error(f"Failed to stop all forwards: {e}")
        if self.on_exit is not None:
            result = self.on_exit()
            if asyncio.iscoroutine(result):
                await result
