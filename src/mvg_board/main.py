"""Main entry point for the MVG departure board."""

import asyncio
import logging
import sys

import aiohttp
from pydantic import ValidationError

from mvg_board.adapters.board.display import ConsoleDisplayAdapter
from mvg_board.adapters.board.formatters import DepartureFormatter
from mvg_board.adapters.board.state import BoardState
from mvg_board.adapters.board.tickers import ClockTicker, RefreshTicker
from mvg_board.adapters.board.updaters import StateUpdater
from mvg_board.adapters.config import AppConfig
from mvg_board.adapters.mvg_api import MvgDepartureRepository
from mvg_board.application.services import DepartureBoardService

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging to stderr, leaving stdout to the board."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


async def main(config: AppConfig) -> None:
    """Run the board until cancelled."""
    tz = config.get_tzinfo()
    logger.info(
        f"Monitoring {config.global_id} ({','.join(config.transport_types)}, "
        f"limit {config.limit}) every {config.refresh_interval_seconds}s"
    )

    # Create aiohttp session for efficient HTTP connections
    async with aiohttp.ClientSession() as session:
        departure_repo = MvgDepartureRepository(
            session,
            url=config.api_url,
            tz=tz,
            timeout=config.mvg_api_timeout,
            log_requests=config.log_requests,
        )
        board_service = DepartureBoardService(departure_repo, config.get_stop_configuration())

        board_state = BoardState()
        state_updater = StateUpdater(board_state)
        display_adapter = ConsoleDisplayAdapter(DepartureFormatter(config))

        async def redraw() -> None:
            await display_adapter.display(board_state.snapshot())

        refresh_ticker = RefreshTicker(
            board_service, state_updater, config.refresh_interval_seconds
        )
        clock_ticker = ClockTicker(
            state_updater, config.clock_interval_seconds, tz=tz, on_tick=redraw
        )

        await display_adapter.start()
        await refresh_ticker.start()
        await clock_ticker.start()
        try:
            # Both tickers run for the lifetime of the process
            await asyncio.Event().wait()
        finally:
            await clock_ticker.stop()
            await refresh_ticker.stop()
            await display_adapter.stop()


def cli_main() -> None:
    """Console script entry point."""
    try:
        config = AppConfig()
    except ValidationError as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(config.log_level)
    try:
        asyncio.run(main(config))
    except KeyboardInterrupt:
        logger.info("Shutting down...")


if __name__ == "__main__":
    cli_main()
