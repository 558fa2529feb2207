"""Protocol for formatting departures."""

from datetime import datetime, timedelta
from typing import Protocol

from mvg_board.domain.models.departure import Departure
from mvg_board.domain.models.departure_view import DepartureView


class DepartureFormatterProtocol(Protocol):
    """Protocol for turning departures and times into display text."""

    def format_departure(self, departure: Departure, now: datetime) -> DepartureView:
        """Build the view model for one departure.

        Args:
            departure: The departure to format.
            now: Reference time for relative formats.

        Returns:
            The departure's display view model.
        """
        ...

    def format_departure_time(self, departure: Departure, now: datetime) -> str:
        """Format the displayed time according to configuration.

        Args:
            departure: The departure to format.
            now: Reference time for relative formats.

        Returns:
            Formatted time string (either relative like "5m" or absolute like "14:30").
        """
        ...

    def format_delay(self, departure: Departure) -> str | None:
        """Format the delay annotation.

        Args:
            departure: The departure to format.

        Returns:
            A string like "+3", or None when no delay should be shown.
        """
        ...

    def format_compact_duration(self, delta: timedelta) -> str:
        """Format timedelta as compact hours and minutes (e.g., '2h40m', '5m', 'now').

        Args:
            delta: The time delta to format.

        Returns:
            Compact duration string like "2h40m" or "5m" or "now".
        """
        ...

    def format_clock(self, time: datetime) -> str:
        """Format the live clock.

        Args:
            time: The time to format.

        Returns:
            Formatted clock string.
        """
        ...
