"""State updaters."""

from mvg_board.adapters.board.updaters.state_updater import StateUpdater

__all__ = ["StateUpdater"]
