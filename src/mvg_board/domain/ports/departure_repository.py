"""Departure repository port."""

from typing import Protocol

from mvg_board.domain.models.departure import Departure


class DepartureRepository(Protocol):
    """Port for retrieving departure information."""

    async def get_departures(
        self,
        station_id: str,
        limit: int = 14,
        offset_minutes: int = 0,
        transport_types: list[str] | None = None,
    ) -> list[Departure]:
        """Get departures for a station in API order.

        Raises:
            FetchError: If the request fails or the response cannot be decoded.
        """
        ...
