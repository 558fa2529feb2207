"""Protocol for updating board state."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from datetime import datetime

    from mvg_board.domain.models.refresh_result import RefreshResult


class StateUpdaterProtocol(Protocol):
    """Protocol for updating board state."""

    def update_in_flight(self, in_flight: bool) -> None:
        """Set whether a refresh cycle is currently running.

        Args:
            in_flight: True while the network call is in progress.
        """
        ...

    def publish_result(self, result: "RefreshResult", time: "datetime") -> None:
        """Replace the latest result and clear the in-flight flag in one step.

        Args:
            result: The outcome of the refresh cycle.
            time: When the cycle finished.
        """
        ...

    def update_current_time(self, time: "datetime") -> None:
        """Update the clock.

        Args:
            time: The current local time.
        """
        ...
