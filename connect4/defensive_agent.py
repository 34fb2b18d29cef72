import logging
from typing import Optional

import numpy as np

from connect4.policy import BoardAccessor, BoardFullError, lowest_empty_index, make_rng, open_columns
from connect4.scanner import find_threat

logger = logging.getLogger(__name__)


class DefensiveAgent:
    """
    Blocks the opponent's immediate win when it sees one, otherwise plays a
    random open column.

    Only three-in-a-row patterns with a playable fourth slot count as a
    threat; there is no lookahead.
    """

    def __init__(self, board: BoardAccessor, is_red: bool, rng: np.random.Generator | int | None = None):
        self.board = board
        self.is_red = bool(is_red)
        self.rng = make_rng(rng)

    # ============================================================
    # TURN
    # ============================================================
    def move(self):
        """
        Place exactly one token.

        The board must have an open column and no winner yet.
        """
        if not open_columns(self.board):
            raise BoardFullError("No open column left to move on.")

        col = self.find_opponent_threat()
        if col is None:
            col = self.random_move()
        else:
            logger.debug("%s blocking column %d", self.name(), col)
        self.commit_move(col)

    def name(self) -> str:
        return "My Defensive Agent"

    # ============================================================
    # DECISION
    # ============================================================
    def find_opponent_threat(self) -> Optional[int]:
        return find_threat(self.board, not self.is_red)

    def random_move(self) -> int:
        cols = self.board.column_count()
        rows = self.board.row_count()

        col = int(self.rng.integers(cols))
        while lowest_empty_index(self.board.get_column(col), rows) == -1:
            col = int(self.rng.integers(cols))
        return col

    # ============================================================
    # DROP
    # ============================================================
    def commit_move(self, col: int) -> Optional[int]:
        """Drop a token in ``col``; full columns are left untouched."""
        column = self.board.get_column(col)
        row = lowest_empty_index(column, self.board.row_count())
        if row == -1:
            return None

        slot = column.get_slot(row)
        if self.is_red:
            slot.set_red()
        else:
            slot.set_yellow()
        return row
