"""Board state dataclass."""

import threading
from dataclasses import dataclass, field
from datetime import datetime

from mvg_board.domain.models.board_snapshot import BoardSnapshot
from mvg_board.domain.models.refresh_result import RefreshResult


def _local_now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class BoardState:
    """Latest refresh outcome, in-flight flag and clock.

    The refresh ticker owns ``latest_result``, ``in_flight`` and
    ``last_update``; the clock ticker owns ``current_time``. Writes go through
    ``StateUpdater`` while holding ``lock``; readers use ``snapshot()``.
    """

    latest_result: RefreshResult | None = None
    in_flight: bool = False
    current_time: datetime = field(default_factory=_local_now)
    last_update: datetime | None = None
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def snapshot(self) -> BoardSnapshot:
        """Return a consistent, immutable copy of the state."""
        with self.lock:
            return BoardSnapshot(
                latest_result=self.latest_result,
                in_flight=self.in_flight,
                current_time=self.current_time,
                last_update=self.last_update,
            )
