"""Updater for board state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mvg_board.adapters.board.state.board_state import (
    BoardState,  # noqa: TC001 - Runtime dependency: used in __init__
)
from mvg_board.domain.contracts.state_updater import StateUpdaterProtocol

if TYPE_CHECKING:
    from datetime import datetime

    from mvg_board.domain.models.refresh_result import RefreshResult

logger = logging.getLogger(__name__)


class StateUpdater(StateUpdaterProtocol):
    """Updates board state under its lock."""

    def __init__(self, board_state: BoardState) -> None:
        """Initialize the state updater.

        Args:
            board_state: The BoardState instance to update.
        """
        self.board_state = board_state

    def update_in_flight(self, in_flight: bool) -> None:
        """Set whether a refresh cycle is currently running.

        Args:
            in_flight: True while the network call is in progress.
        """
        with self.board_state.lock:
            self.board_state.in_flight = in_flight
        logger.debug(f"Updated in-flight flag: {in_flight}")

    def publish_result(self, result: RefreshResult, time: datetime) -> None:
        """Replace the latest result and clear the in-flight flag in one step.

        Args:
            result: The outcome of the refresh cycle.
            time: When the cycle finished.
        """
        with self.board_state.lock:
            self.board_state.latest_result = result
            self.board_state.last_update = time
            self.board_state.in_flight = False
        if result.is_success:
            logger.debug(f"Published {len(result.departures)} departures")
        else:
            logger.debug(f"Published failure: {result.error}")

    def update_current_time(self, time: datetime) -> None:
        """Update the clock.

        Args:
            time: The current local time.
        """
        with self.board_state.lock:
            self.board_state.current_time = time
