"""Display adapters."""

from mvg_board.adapters.board.display.console_display import ConsoleDisplayAdapter

__all__ = ["ConsoleDisplayAdapter"]
