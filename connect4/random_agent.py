import numpy as np

from connect4.policy import BoardAccessor, BoardFullError, lowest_empty_index, make_rng, open_columns


class RandomAgent:
    """Baseline opponent: any open column, uniformly."""

    def __init__(self, board: BoardAccessor, is_red: bool, rng: np.random.Generator | int | None = None):
        self.board = board
        self.is_red = bool(is_red)
        self.rng = make_rng(rng)

    def move(self):
        available = open_columns(self.board)
        if not available:
            raise BoardFullError("No open column left to move on.")

        col = int(self.rng.choice(available))
        column = self.board.get_column(col)
        slot = column.get_slot(lowest_empty_index(column, self.board.row_count()))
        if self.is_red:
            slot.set_red()
        else:
            slot.set_yellow()

    def name(self) -> str:
        return "Random Agent"
