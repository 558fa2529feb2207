"""Departure board service port."""

from typing import Protocol

from mvg_board.domain.models.departure import Departure


class DepartureBoardService(Protocol):
    """Port for the fetch-and-normalize pipeline."""

    async def fetch_departures(self) -> list[Departure]:
        """Fetch departures for the configured stop, sorted by displayed time.

        Raises:
            FetchError: If the request fails or the response cannot be decoded.
        """
        ...
