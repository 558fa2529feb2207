"""Domain layer - core models and ports."""

from mvg_board.domain.models import (
    BoardSnapshot,
    Departure,
    FetchError,
    RawDeparture,
    RefreshResult,
)
from mvg_board.domain.ports import (
    DepartureBoardService,
    DepartureRepository,
    DisplayAdapter,
)

__all__ = [
    "BoardSnapshot",
    "Departure",
    "DepartureBoardService",
    "DepartureRepository",
    "DisplayAdapter",
    "FetchError",
    "RawDeparture",
    "RefreshResult",
]
