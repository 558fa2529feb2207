"""Ports (interfaces) for the ports-and-adapters architecture."""

from mvg_board.domain.ports.departure_board_service import DepartureBoardService
from mvg_board.domain.ports.departure_repository import DepartureRepository
from mvg_board.domain.ports.display_adapter import DisplayAdapter

__all__ = [
    "DepartureBoardService",
    "DepartureRepository",
    "DisplayAdapter",
]
