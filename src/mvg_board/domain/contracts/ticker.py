"""Protocol for periodic background tasks."""

from typing import Protocol


class TickerProtocol(Protocol):
    """Protocol for a loop that runs until stopped."""

    async def start(self) -> None:
        """Start the ticker."""
        ...

    async def stop(self) -> None:
        """Stop the ticker."""
        ...
