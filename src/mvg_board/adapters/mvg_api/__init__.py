"""MVG API adapters."""

from mvg_board.adapters.mvg_api.mvg_departure_repository import MvgDepartureRepository

__all__ = ["MvgDepartureRepository"]
