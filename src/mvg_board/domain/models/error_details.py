"""Error details domain model."""

from pydantic import BaseModel, ConfigDict

_STATUS_REASONS = {
    429: "Rate limit exceeded",
    502: "Bad gateway (server error)",
    503: "Service unavailable",
    504: "Gateway timeout",
}


class ErrorDetails(BaseModel):
    """Details about an error, including HTTP status code if applicable."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    reason: str

    @classmethod
    def from_status_code(cls, status_code: int | None) -> "ErrorDetails":
        """Derive a human readable reason from an HTTP status code."""
        if status_code is None:
            reason = "Unknown error"
        else:
            reason = _STATUS_REASONS.get(status_code, f"HTTP {status_code}")
        return cls(status_code=status_code, reason=reason)
