"""Stop configuration domain model."""

from dataclasses import dataclass

DEFAULT_TRANSPORT_TYPES = ("SBAHN", "BUS", "UBAHN", "TRAM")


@dataclass(frozen=True)
class StopConfiguration:
    """The single stop the board monitors and how to query it."""

    station_id: str
    limit: int = 14
    offset_minutes: int = 0
    transport_types: tuple[str, ...] = DEFAULT_TRANSPORT_TYPES
