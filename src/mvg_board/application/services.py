"""Application services (use cases) for the departure board."""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from mvg_board.domain.models import Departure, StopConfiguration

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from mvg_board.domain.ports import DepartureRepository


def sort_by_displayed_time(departures: Iterable[Departure]) -> list[Departure]:
    """Sort departures ascending by displayed time.

    The sort is stable: departures with equal displayed times keep their
    input order.
    """
    return sorted(departures, key=lambda d: d.displayed_time)


class DepartureBoardService:
    """Fetches and orders departures for the configured stop."""

    def __init__(
        self, departure_repository: "DepartureRepository", stop_config: StopConfiguration
    ) -> None:
        """Initialize with a departure repository and the stop to query."""
        self._departure_repository = departure_repository
        self.stop_config = stop_config

    async def fetch_departures(self) -> list[Departure]:
        """Fetch departures once and return them sorted by displayed time.

        Makes exactly one repository call; retrying is left to the caller.

        Raises:
            FetchError: If the request fails or the response cannot be decoded.
        """
        departures = await self._departure_repository.get_departures(
            self.stop_config.station_id,
            limit=self.stop_config.limit,
            offset_minutes=self.stop_config.offset_minutes,
            transport_types=list(self.stop_config.transport_types),
        )
        logger.debug(
            f"Fetched {len(departures)} departures for {self.stop_config.station_id}"
        )
        return sort_by_displayed_time(departures)
