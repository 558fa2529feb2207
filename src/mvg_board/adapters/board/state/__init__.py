"""Shared board state written by the tickers and read by the display."""

from mvg_board.adapters.board.state.board_state import BoardState

__all__ = ["BoardState"]
