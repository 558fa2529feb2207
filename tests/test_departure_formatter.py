"""Tests for DepartureFormatter."""

from datetime import UTC, datetime, timedelta

import pytest

from mvg_board.adapters.board.formatters import DepartureFormatter
from mvg_board.adapters.config import AppConfig
from mvg_board.domain.models import RenderVariant
from tests.fakes import BASE_TIME, make_departure


@pytest.fixture
def formatter() -> DepartureFormatter:
    """Create a formatter using UTC and absolute times."""
    return DepartureFormatter(AppConfig.for_testing(timezone="UTC", time_format="at"))


def test_format_delayed_departure(formatter: DepartureFormatter) -> None:
    """Given a realtime delay, when formatting, then plain time and '+N' are shown."""
    departure = make_departure(7, planned_minutes=5, delay_minutes=2)

    view = formatter.format_departure(departure, BASE_TIME)

    assert view.time_text == "10:07"
    assert view.delay_text == "+2"
    assert view.italic is False
    assert view.variant is RenderVariant.PLAIN


def test_format_on_time_realtime_departure_shows_plus_zero(formatter: DepartureFormatter) -> None:
    """Given a realtime departure with zero delay, when formatting, then '+0' is shown."""
    view = formatter.format_departure(make_departure(3, delay_minutes=0), BASE_TIME)

    assert view.delay_text == "+0"
    assert view.italic is False


def test_format_departure_without_realtime_is_italic(formatter: DepartureFormatter) -> None:
    """Given no realtime data, when formatting, then time is italic without a delay."""
    view = formatter.format_departure(make_departure(3, delay_minutes=None), BASE_TIME)

    assert view.delay_text is None
    assert view.italic is True


def test_format_cancelled_departure_shows_planned_time_struck(
    formatter: DepartureFormatter,
) -> None:
    """Given a cancelled departure, when formatting, then only the planned time is shown, struck."""
    departure = make_departure(12, cancelled=True, planned_minutes=5, delay_minutes=7)

    view = formatter.format_departure(departure, BASE_TIME)

    assert view.time_text == "10:05"
    assert view.delay_text is None
    assert view.italic is False
    assert view.variant is RenderVariant.STRUCK


def test_format_departure_time_in_minutes_mode() -> None:
    """Given the minutes format, when formatting, then a relative time is shown."""
    formatter = DepartureFormatter(AppConfig.for_testing(timezone="UTC", time_format="minutes"))

    assert formatter.format_departure_time(make_departure(10), BASE_TIME) == "10m"
    assert formatter.format_departure_time(make_departure(-2), BASE_TIME) == "now"


def test_format_departure_time_uses_configured_zone() -> None:
    """Given a Berlin zone, when formatting, then local wall time is shown."""
    formatter = DepartureFormatter(AppConfig.for_testing(timezone="Europe/Berlin"))

    assert formatter.format_departure_time(make_departure(0), BASE_TIME) == "11:00"


def test_format_negative_delay(formatter: DepartureFormatter) -> None:
    """Given an early departure, when formatting, then the delay shows a minus sign."""
    assert formatter.format_delay(make_departure(4, delay_minutes=-1)) == "-1"


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(seconds=-5), "now"),
        (timedelta(seconds=30), "<1m"),
        (timedelta(minutes=5), "5m"),
        (timedelta(hours=2), "2h"),
        (timedelta(hours=2, minutes=40), "2h40m"),
    ],
)
def test_format_compact_duration(
    formatter: DepartureFormatter, delta: timedelta, expected: str
) -> None:
    """Given a duration, when formatting compactly, then hours and minutes are abbreviated."""
    assert formatter.format_compact_duration(delta) == expected


def test_format_clock(formatter: DepartureFormatter) -> None:
    """Given a time, when formatting the clock, then HH:MM:SS is shown."""
    assert formatter.format_clock(datetime(2024, 1, 15, 9, 5, 7, tzinfo=UTC)) == "09:05:07"
