"""Display view model for a departure."""

from dataclasses import dataclass

from mvg_board.domain.models.render_variant import RenderVariant


@dataclass(frozen=True)
class DepartureView:
    """Pre-formatted text for one departure tile."""

    time_text: str
    destination: str
    vehicle_label: str
    delay_text: str | None  # e.g. "+3"; None when cancelled or not realtime
    variant: RenderVariant
    italic: bool  # time not confirmed by realtime data
