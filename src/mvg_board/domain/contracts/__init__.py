"""Contracts (protocols) between board components."""

from mvg_board.domain.contracts.departure_formatter import DepartureFormatterProtocol
from mvg_board.domain.contracts.state_updater import StateUpdaterProtocol
from mvg_board.domain.contracts.ticker import TickerProtocol

__all__ = [
    "DepartureFormatterProtocol",
    "StateUpdaterProtocol",
    "TickerProtocol",
]
