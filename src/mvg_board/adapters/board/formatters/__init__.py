"""Formatters for departure display."""

from mvg_board.adapters.board.formatters.departure_formatter import DepartureFormatter

__all__ = ["DepartureFormatter"]
