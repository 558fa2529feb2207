"""Tests for application services."""

import pytest

from mvg_board.application.services import DepartureBoardService, sort_by_displayed_time
from mvg_board.domain.models import FetchError, StopConfiguration
from tests.fakes import MockDepartureRepository, make_departure


@pytest.fixture
def stop_config() -> StopConfiguration:
    """Create the default stop configuration."""
    return StopConfiguration(station_id="de:09184:2000")


def test_sort_orders_by_displayed_time_and_keeps_ties_stable() -> None:
    """Given times [10:05, 10:02, 10:05], when sorting, then ties keep their input order."""
    first = make_departure(5, destination="first")
    earliest = make_departure(2, destination="earliest")
    second = make_departure(5, destination="second")

    result = sort_by_displayed_time([first, earliest, second])

    assert [d.destination for d in result] == ["earliest", "first", "second"]
    assert result[1] is first
    assert result[2] is second


def test_sort_uses_planned_time_for_cancelled_departures() -> None:
    """Given a cancelled departure whose actual time is later, when sorting, then planned time counts."""
    running = make_departure(4, destination="running")
    cancelled = make_departure(10, destination="cancelled", cancelled=True, planned_minutes=1)

    result = sort_by_displayed_time([running, cancelled])

    assert [d.destination for d in result] == ["cancelled", "running"]


def test_sort_of_empty_list_is_empty() -> None:
    """Given no departures, when sorting, then the result is empty."""
    assert sort_by_displayed_time([]) == []


@pytest.mark.asyncio
async def test_fetch_departures_returns_sorted_list(stop_config: StopConfiguration) -> None:
    """Given unsorted departures, when fetching, then they come back sorted."""
    repo = MockDepartureRepository(
        [
            make_departure(5, destination="first"),
            make_departure(2, destination="earliest"),
            make_departure(5, destination="second"),
        ]
    )
    service = DepartureBoardService(repo, stop_config)

    result = await service.fetch_departures()

    assert [d.destination for d in result] == ["earliest", "first", "second"]


@pytest.mark.asyncio
async def test_fetch_departures_queries_configured_stop_once(
    stop_config: StopConfiguration,
) -> None:
    """Given a stop configuration, when fetching, then the repository is called once with it."""
    repo = MockDepartureRepository([])
    service = DepartureBoardService(repo, stop_config)

    result = await service.fetch_departures()

    assert result == []
    assert repo.calls == [
        {
            "station_id": "de:09184:2000",
            "limit": 14,
            "offset_minutes": 0,
            "transport_types": ["SBAHN", "BUS", "UBAHN", "TRAM"],
        }
    ]


@pytest.mark.asyncio
async def test_fetch_departures_propagates_fetch_error(stop_config: StopConfiguration) -> None:
    """Given a failing repository, when fetching, then the FetchError propagates without retry."""
    repo = MockDepartureRepository([])
    calls = 0

    async def failing_get_departures(*args, **kwargs):  # noqa: ARG001
        nonlocal calls
        calls += 1
        raise FetchError("Got response (502)", status_code=502)

    repo.get_departures = failing_get_departures
    service = DepartureBoardService(repo, stop_config)

    with pytest.raises(FetchError, match="502"):
        await service.fetch_departures()
    assert calls == 1
