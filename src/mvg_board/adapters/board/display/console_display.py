"""Plain-text display of the board on a terminal."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from mvg_board.domain.models.render_variant import RenderVariant
from mvg_board.domain.ports.display_adapter import DisplayAdapter

if TYPE_CHECKING:
    from mvg_board.domain.contracts.departure_formatter import DepartureFormatterProtocol
    from mvg_board.domain.models.board_snapshot import BoardSnapshot
    from mvg_board.domain.models.departure_view import DepartureView

logger = logging.getLogger(__name__)

STRIKE = "\x1b[9m"
ITALIC = "\x1b[3m"
RESET = "\x1b[0m"
CLEAR_SCREEN = "\x1b[2J\x1b[H"

FETCH_FAILED_PREFIX = "Fetching data failed: "
NO_DEPARTURES = "No departures"
REFRESHING = "refreshing..."


class ConsoleDisplayAdapter(DisplayAdapter):
    """Redraws the whole board on each call to ``display``."""

    def __init__(
        self,
        formatter: DepartureFormatterProtocol,
        stream: TextIO | None = None,
        ansi: bool = True,
    ) -> None:
        """Initialize the console display.

        Args:
            formatter: Formatter for departures and the clock.
            stream: Output stream (defaults to stdout).
            ansi: Use ANSI escapes for strike-through, italics and clearing.
        """
        self.formatter = formatter
        self.stream = stream if stream is not None else sys.stdout
        self.ansi = ansi

    async def start(self) -> None:
        """Start the display adapter."""
        logger.info("Console display started")

    async def stop(self) -> None:
        """Stop the display adapter."""
        self.stream.write("\n")
        self.stream.flush()
        logger.info("Console display stopped")

    async def display(self, snapshot: BoardSnapshot) -> None:
        """Render one snapshot of the board."""
        lines = self.render_lines(snapshot)
        prefix = CLEAR_SCREEN if self.ansi else ""
        self.stream.write(prefix + "\n".join(lines) + "\n")
        self.stream.flush()

    def render_lines(self, snapshot: BoardSnapshot) -> list[str]:
        """Build the board as text lines: clock header, then departures or error."""
        header = self.formatter.format_clock(snapshot.current_time)
        if snapshot.in_flight:
            header = f"{header}  {REFRESHING}"
        lines = [header]

        result = snapshot.latest_result
        if result is None:
            return lines
        if result.error is not None:
            lines.append(f"{FETCH_FAILED_PREFIX}{result.error.message}")
            return lines
        if not result.departures:
            lines.append(NO_DEPARTURES)
            return lines

        for departure in result.departures:
            view = self.formatter.format_departure(departure, snapshot.current_time)
            lines.append(self.render_tile(view))
        return lines

    def render_tile(self, view: DepartureView) -> str:
        """Render one departure as "<label> [<destination>] <time> <delay>"."""
        time_text = view.time_text
        if view.italic and self.ansi:
            time_text = f"{ITALIC}{time_text}{RESET}"
        text = f"{view.vehicle_label} [{view.destination}] {time_text}"
        if view.delay_text is not None:
            text = f"{text} {view.delay_text}"
        if view.variant is RenderVariant.STRUCK:
            text = f"{STRIKE}{text}{RESET}" if self.ansi else f"~{text}~"
        return text
