"""Display adapter port."""

from abc import ABC, abstractmethod

from mvg_board.domain.models.board_snapshot import BoardSnapshot


class DisplayAdapter(ABC):
    """Port for showing the board to users."""

    @abstractmethod
    async def display(self, snapshot: BoardSnapshot) -> None:
        """Render one snapshot of the board."""
        ...

    @abstractmethod
    async def start(self) -> None:
        """Start the display adapter."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Stop the display adapter."""
        ...
