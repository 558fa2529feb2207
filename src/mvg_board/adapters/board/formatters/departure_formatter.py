"""Formatter for departures and the clock."""

from datetime import datetime, timedelta

from mvg_board.adapters.config.app_config import AppConfig
from mvg_board.domain.contracts.departure_formatter import DepartureFormatterProtocol
from mvg_board.domain.models.departure import Departure
from mvg_board.domain.models.departure_view import DepartureView


class DepartureFormatter(DepartureFormatterProtocol):
    """Formatter for departure times based on configuration."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize the formatter.

        Args:
            config: Application configuration with timezone and time format settings.
        """
        self.config = config
        self._tz = config.get_tzinfo()

    def format_departure(self, departure: Departure, now: datetime) -> DepartureView:
        """Build the view model for one departure.

        Cancelled departures show their planned time only. Departures without
        realtime data show an italic time and no delay.
        """
        return DepartureView(
            time_text=self.format_departure_time(departure, now),
            destination=departure.destination,
            vehicle_label=departure.vehicle_label,
            delay_text=self.format_delay(departure),
            variant=departure.render_variant,
            italic=not departure.cancelled and not departure.is_realtime,
        )

    def format_departure_time(self, departure: Departure, now: datetime) -> str:
        """Format the displayed time according to configuration."""
        displayed = departure.displayed_time.astimezone(self._tz)
        if self.config.time_format == "minutes":
            return self.format_compact_duration(displayed - now)
        # "at" format
        return displayed.strftime("%H:%M")

    def format_delay(self, departure: Departure) -> str | None:
        """Format the delay as "+N" minutes, including "+0"."""
        if departure.cancelled or departure.delay is None:
            return None
        minutes = int(departure.delay.total_seconds() // 60)
        return f"{minutes:+d}"

    def format_compact_duration(self, delta: timedelta) -> str:
        """Format timedelta as compact hours and minutes (e.g., '2h40m', '5m', 'now')."""
        total_seconds = int(delta.total_seconds())
        if total_seconds < 0:
            return "now"
        if total_seconds < 60:
            return "<1m"

        total_minutes = total_seconds // 60
        if total_minutes < 60:
            return f"{total_minutes}m"

        hours = total_minutes // 60
        minutes = total_minutes % 60
        if minutes == 0:
            return f"{hours}h"
        return f"{hours}h{minutes}m"

    def format_clock(self, time: datetime) -> str:
        """Format the live clock."""
        return time.astimezone(self._tz).strftime(self.config.clock_format)
