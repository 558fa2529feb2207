"""Periodic background tasks."""

from mvg_board.adapters.board.tickers.clock_ticker import ClockTicker
from mvg_board.adapters.board.tickers.refresh_ticker import RefreshTicker

__all__ = ["ClockTicker", "RefreshTicker"]
