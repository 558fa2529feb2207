"""Departure domain model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta, tzinfo

from mvg_board.domain.models.raw_departure import RawDeparture
from mvg_board.domain.models.render_variant import RenderVariant

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def from_epoch_millis(millis: int, tz: tzinfo | None = None) -> datetime:
    """Convert epoch milliseconds to an aware datetime in ``tz``.

    ``tz=None`` means the system's local zone.
    """
    return (_EPOCH + timedelta(milliseconds=millis)).astimezone(tz)


@dataclass(frozen=True)
class Departure:
    """A normalized departure, built once per raw record per refresh cycle."""

    actual_time: datetime
    planned_time: datetime
    delay: timedelta | None  # None when the source has no realtime data
    destination: str
    vehicle_label: str
    cancelled: bool
    transport_type: str | None = None
    platform: int | None = None
    messages: tuple[str, ...] = ()

    @property
    def displayed_time(self) -> datetime:
        """The time a rider should see: planned when cancelled, actual otherwise."""
        if self.cancelled:
            return self.planned_time
        return self.actual_time

    @property
    def is_realtime(self) -> bool:
        """Whether the delay is backed by realtime data."""
        return self.delay is not None

    @property
    def render_variant(self) -> RenderVariant:
        """Struck through when cancelled, plain otherwise."""
        return RenderVariant.STRUCK if self.cancelled else RenderVariant.PLAIN

    @classmethod
    def from_raw(cls, raw: RawDeparture, tz: tzinfo | None = None) -> Departure:
        """Build a departure from a raw wire record.

        The raw delay is only kept when the record is realtime-backed; a
        non-realtime record has an unknown delay even if the API sends a value.
        """
        delay = timedelta(minutes=raw.delay_in_minutes) if raw.realtime else None
        return cls(
            actual_time=from_epoch_millis(raw.realtime_departure_time, tz),
            planned_time=from_epoch_millis(raw.planned_departure_time, tz),
            delay=delay,
            destination=raw.destination,
            vehicle_label=raw.label,
            cancelled=raw.cancelled,
            transport_type=raw.transport_type,
            platform=raw.platform,
            messages=tuple(raw.messages or ()),
        )
