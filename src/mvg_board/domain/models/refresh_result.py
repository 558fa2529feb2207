"""Outcome of one refresh cycle."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from mvg_board.domain.models.departure import Departure
from mvg_board.domain.models.fetch_error import FetchError


@dataclass(frozen=True)
class RefreshResult:
    """Either an ordered departure list or the error that prevented it.

    An empty ``departures`` tuple with no error is a successful refresh.
    """

    departures: tuple[Departure, ...] = ()
    error: FetchError | None = None

    @classmethod
    def success(cls, departures: Iterable[Departure]) -> RefreshResult:
        return cls(departures=tuple(departures))

    @classmethod
    def failure(cls, error: FetchError) -> RefreshResult:
        return cls(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None
