"""Read-only snapshot of the board state."""

from dataclasses import dataclass
from datetime import datetime

from mvg_board.domain.models.refresh_result import RefreshResult


@dataclass(frozen=True)
class BoardSnapshot:
    """What the presentation layer sees at one instant."""

    latest_result: RefreshResult | None  # None until the first cycle completes
    in_flight: bool
    current_time: datetime
    last_update: datetime | None = None
