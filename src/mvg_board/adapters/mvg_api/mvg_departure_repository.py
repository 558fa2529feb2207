"""MVG departure repository adapter."""

from __future__ import annotations

import asyncio
import logging
from datetime import tzinfo
from typing import TYPE_CHECKING, Any

import aiohttp
from pydantic import TypeAdapter, ValidationError

from mvg_board.adapters.api_request_logger import log_api_request
from mvg_board.domain.models.departure import Departure
from mvg_board.domain.models.fetch_error import DecodeError, TransportError
from mvg_board.domain.models.raw_departure import RawDeparture
from mvg_board.domain.ports.departure_repository import DepartureRepository

if TYPE_CHECKING:
    from aiohttp import ClientSession

logger = logging.getLogger(__name__)

MVG_DEPARTURE_URL = "https://www.mvg.de/api/fib/v2/departure"

_RAW_DEPARTURES = TypeAdapter(list[RawDeparture])


class MvgDepartureRepository(DepartureRepository):
    """Adapter for the MVG departure endpoint."""

    def __init__(
        self,
        session: ClientSession,
        url: str = MVG_DEPARTURE_URL,
        tz: tzinfo | None = None,
        timeout: float | None = None,
        log_requests: bool = False,
    ) -> None:
        """Initialize the repository.

        Args:
            session: Shared aiohttp session.
            url: Departure endpoint.
            tz: Zone for converted times (None: system local time).
            timeout: Total request timeout in seconds (None: session default).
            log_requests: Log each outgoing request.
        """
        self._session = session
        self._url = url
        self._tz = tz
        self._timeout = aiohttp.ClientTimeout(total=timeout) if timeout is not None else None
        self._log_requests = log_requests

    async def get_departures(
        self,
        station_id: str,
        limit: int = 14,
        offset_minutes: int = 0,
        transport_types: list[str] | None = None,
    ) -> list[Departure]:
        """Get departures for a station in the order the API returns them.

        Raises:
            TransportError: If the request cannot complete or returns a non-2xx status.
            DecodeError: If the body is not a JSON array of departure records.
        """
        params: dict[str, str | int] = {
            "globalId": station_id,
            "limit": limit,
            "offsetInMinutes": offset_minutes,
        }
        if transport_types:
            params["transportTypes"] = ",".join(transport_types)
        headers = {"accept": "application/json"}

        log_api_request("GET", self._url, params, headers, enabled=self._log_requests)
        body = await self._fetch_body(params, headers)
        raw_departures = self._decode(body)
        return [Departure.from_raw(raw, self._tz) for raw in raw_departures]

    async def _fetch_body(self, params: dict[str, str | int], headers: dict[str, str]) -> bytes:
        """Perform the single GET request and return the raw body."""
        kwargs: dict[str, Any] = {"params": params, "headers": headers}
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        try:
            async with self._session.get(self._url, **kwargs) as response:
                if response.status >= 400:
                    text = await response.text(errors="replace")
                    logger.error(f"MVG API returned status {response.status}: {text[:200]}")
                    raise TransportError(
                        f"Got response ({response.status}) from {self._url}",
                        status_code=response.status,
                    )
                return await response.read()
        except aiohttp.ClientError as e:
            raise TransportError(f"Request to {self._url} failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"Request to {self._url} timed out") from e

    @staticmethod
    def _decode(body: bytes) -> list[RawDeparture]:
        """Parse the body as a list of raw departure records."""
        try:
            return _RAW_DEPARTURES.validate_json(body)
        except ValidationError as e:
            raise DecodeError(
                f"Unexpected response format: {e.error_count()} validation error(s), "
                f"first: {e.errors()[0]['msg']}"
            ) from e
