"""Domain models for the MVG departure board."""

from mvg_board.domain.models.board_snapshot import BoardSnapshot
from mvg_board.domain.models.departure import Departure, from_epoch_millis
from mvg_board.domain.models.departure_view import DepartureView
from mvg_board.domain.models.error_details import ErrorDetails
from mvg_board.domain.models.fetch_error import DecodeError, FetchError, TransportError
from mvg_board.domain.models.raw_departure import RawDeparture
from mvg_board.domain.models.refresh_result import RefreshResult
from mvg_board.domain.models.render_variant import RenderVariant
from mvg_board.domain.models.stop_configuration import StopConfiguration

__all__ = [
    "BoardSnapshot",
    "DecodeError",
    "Departure",
    "DepartureView",
    "ErrorDetails",
    "FetchError",
    "RawDeparture",
    "RefreshResult",
    "RenderVariant",
    "StopConfiguration",
    "TransportError",
    "from_epoch_millis",
]
