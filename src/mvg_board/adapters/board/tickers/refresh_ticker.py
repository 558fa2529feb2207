"""Refresh ticker: fetches departures and publishes the outcome."""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from mvg_board.domain.contracts.state_updater import (
    StateUpdaterProtocol,  # noqa: TC001 - Runtime dependency: used in __init__ signature
)
from mvg_board.domain.contracts.ticker import TickerProtocol
from mvg_board.domain.models.fetch_error import FetchError
from mvg_board.domain.models.refresh_result import RefreshResult

if TYPE_CHECKING:
    from mvg_board.domain.ports import DepartureBoardService

logger = logging.getLogger(__name__)


class RefreshTicker(TickerProtocol):
    """Runs refresh cycles one after another, forever.

    Each cycle sets the in-flight flag, fetches, then publishes the result and
    clears the flag together. The interval is measured from the end of a cycle,
    so a slow fetch delays the next cycle instead of overlapping with it.
    """

    def __init__(
        self,
        board_service: DepartureBoardService,
        state_updater: StateUpdaterProtocol,
        refresh_interval_seconds: float = 5,
    ) -> None:
        """Initialize the refresh ticker.

        Args:
            board_service: Pipeline that fetches and orders departures.
            state_updater: Updater for the shared board state.
            refresh_interval_seconds: Pause after each published result.
        """
        self.board_service = board_service
        self.state_updater = state_updater
        self.refresh_interval_seconds = refresh_interval_seconds
        self._task: asyncio.Task | None = None

    async def start(self) -> None:
        """Start the refresh ticker."""
        if self._task is not None and not self._task.done():
            logger.warning("Refresh ticker already running")
            return

        self._task = asyncio.create_task(self._refresh_loop())
        logger.info(f"Started refresh ticker (interval: {self.refresh_interval_seconds}s)")

    async def stop(self) -> None:
        """Stop the refresh ticker."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            logger.info("Stopped refresh ticker")

    async def _refresh_loop(self) -> None:
        """Main refresh loop."""
        try:
            while True:
                await self.refresh_once()
                await asyncio.sleep(self.refresh_interval_seconds)
        except asyncio.CancelledError:
            logger.info("Refresh ticker cancelled")
            raise

    async def refresh_once(self) -> RefreshResult:
        """Run a single refresh cycle and publish its outcome."""
        self.state_updater.update_in_flight(True)
        try:
            departures = await self.board_service.fetch_departures()
            result = RefreshResult.success(departures)
        except FetchError as e:
            details = e.details
            logger.error(
                f"Refresh failed: {details.reason} (status: {details.status_code}, error: {e})"
            )
            if details.status_code == 429:
                logger.warning("Rate limit (429) detected - consider a longer refresh interval")
            result = RefreshResult.failure(e)
        except Exception as e:
            logger.error(f"Unexpected error during refresh: {e}", exc_info=True)
            result = RefreshResult.failure(FetchError(str(e) or e.__class__.__name__))

        self.state_updater.publish_result(result, datetime.now(UTC))
        return result
