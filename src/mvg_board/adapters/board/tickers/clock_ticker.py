"""Clock ticker: publishes the current time every interval."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import datetime, tzinfo

from mvg_board.domain.contracts.state_updater import (
    StateUpdaterProtocol,  # noqa: TC001 - Runtime dependency: used in __init__ signature
)
from mvg_board.domain.contracts.ticker import TickerProtocol

logger = logging.getLogger(__name__)


class ClockTicker(TickerProtocol):
    """Publishes the current time, independent of any refresh in progress."""

    def __init__(
        self,
        state_updater: StateUpdaterProtocol,
        interval_seconds: float = 1,
        tz: tzinfo | None = None,
        on_tick: Callable[[], Awaitable[None]] | None = None,
    ) -> None:
        """Initialize the clock ticker.

        Args:
            state_updater: Updater for the shared board state.
            interval_seconds: Time between ticks.
            tz: Zone of the published time (None: system local time).
            on_tick: Optional callback run after each published tick, e.g. a redraw.
        """
        self.state_updater = state_updater
        self.interval_seconds = interval_seconds
        self.tz = tz
        self.on_tick = on_tick
        self._task: asyncio.Task | None = None

    async def start(self) -> None:
        """Start the clock ticker."""
        if self._task is not None and not self._task.done():
            logger.warning("Clock ticker already running")
            return

        self._task = asyncio.create_task(self._tick_loop())
        logger.info("Started clock ticker")

    async def stop(self) -> None:
        """Stop the clock ticker."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            logger.info("Stopped clock ticker")

    async def _tick_loop(self) -> None:
        """Main tick loop."""
        while True:
            await self.tick()
            await asyncio.sleep(self.interval_seconds)

    async def tick(self) -> datetime:
        """Publish the current time once and run the callback."""
        now = datetime.now().astimezone(self.tz)
        self.state_updater.update_current_time(now)
        if self.on_tick is not None:
            try:
                await self.on_tick()
            except Exception as e:
                logger.error(f"Clock tick callback failed: {e}", exc_info=True)
        return now
