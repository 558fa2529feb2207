"""Errors raised while fetching departures."""

from mvg_board.domain.models.error_details import ErrorDetails


class FetchError(Exception):
    """A refresh cycle could not produce a departure list.

    Transport and decode failures are both FetchErrors; they are handled the
    same way and only differ in their message.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    @property
    def details(self) -> ErrorDetails:
        """Status code and reason for logging."""
        return ErrorDetails.from_status_code(self.status_code)


class TransportError(FetchError):
    """The request could not complete (DNS, connection, timeout, HTTP status)."""


class DecodeError(FetchError):
    """The response body did not match the expected schema."""
