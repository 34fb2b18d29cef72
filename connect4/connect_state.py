import numpy as np
from typing import List

EMPTY = 0
RED = 1
YELLOW = -1


def color_value(is_red: bool) -> int:
    return RED if is_red else YELLOW


class Slot:
    """View over one cell of a ConnectState board."""

    __slots__ = ("_state", "row", "col")

    def __init__(self, state: "ConnectState", row: int, col: int):
        self._state = state
        self.row = row
        self.col = col

    def is_filled(self) -> bool:
        return bool(self._state.board[self.row, self.col] != EMPTY)

    def is_red(self) -> bool:
        return bool(self._state.board[self.row, self.col] == RED)

    def set_red(self):
        self._fill(RED)

    def set_yellow(self):
        self._fill(YELLOW)

    def _fill(self, value: int):
        if self.is_filled():
            raise ValueError(f"Slot ({self.row}, {self.col}) is already filled.")
        self._state.board[self.row, self.col] = value

    def __repr__(self):
        return f"Slot(row={self.row}, col={self.col}, value={int(self._state.board[self.row, self.col])})"


class Column:
    __slots__ = ("_state", "index")

    def __init__(self, state: "ConnectState", index: int):
        self._state = state
        self.index = index

    def get_slot(self, row: int) -> Slot:
        if not 0 <= row < self._state.rows:
            raise IndexError(f"Row {row} out of range.")
        return Slot(self._state, row, self.index)


class ConnectState:
    ROWS = 6
    COLS = 7

    # ------------------------------------------------------
    def __init__(self, board: np.ndarray | None = None, rows: int = ROWS, cols: int = COLS):
        if board is None:
            self.board = np.zeros((rows, cols), dtype=np.int8)
        else:
            self.board = np.array(board, dtype=np.int8)

        self.rows, self.cols = self.board.shape
        self.lines = _compute_lines(self.rows, self.cols)
        self._refresh()

    def _refresh(self):
        # O(1) heights
        self.heights = np.zeros(self.cols, dtype=np.int8)
        for c in range(self.cols):
            nz = np.nonzero(self.board[:, c])[0]
            self.heights[c] = 0 if nz.size == 0 else self.rows - nz[0]

        self.empty_count = int(np.count_nonzero(self.board == EMPTY))

        # cached winner
        self._winner = self.find_winner()

    # ------------------------------------------------------
    # Accessor contract
    # ------------------------------------------------------
    def column_count(self) -> int:
        return self.cols

    def row_count(self) -> int:
        return self.rows

    def get_column(self, col: int) -> Column:
        if not 0 <= col < self.cols:
            raise IndexError(f"Column {col} out of range.")
        return Column(self, col)

    # ------------------------------------------------------
    def _check_after_move(self, row: int, col: int) -> int:
        player = self.board[row, col]
        dirs = [(0, 1), (1, 0), (1, 1), (1, -1)]

        for dr, dc in dirs:
            count = 1

            # forward
            r, c = row + dr, col + dc
            while 0 <= r < self.rows and 0 <= c < self.cols and self.board[r, c] == player:
                count += 1
                r += dr
                c += dc

            # backward
            r, c = row - dr, col - dc
            while 0 <= r < self.rows and 0 <= c < self.cols and self.board[r, c] == player:
                count += 1
                r -= dr
                c -= dc

            if count >= 4:
                return int(player)

        return 0

    def find_winner(self) -> int:
        """Full scan over every four-cell line; 1, -1 or 0."""
        if self.lines.size == 0:
            return 0
        values = self.board[self.lines[..., 0], self.lines[..., 1]].astype(np.int16)
        sums = values.sum(axis=1)
        if np.any(sums == 4 * RED):
            return RED
        if np.any(sums == 4 * YELLOW):
            return YELLOW
        return 0

    # ------------------------------------------------------
    def drop(self, col: int, is_red: bool) -> int:
        if not 0 <= col < self.cols:
            raise ValueError(f"Column {col} out of range.")
        if self.board[0, col] != EMPTY:
            raise ValueError(f"Column {col} is full.")

        row = self.rows - 1 - int(self.heights[col])
        self.board[row, col] = color_value(is_red)
        self.register_move(row, col)
        return row

    def register_move(self, row: int, col: int):
        """Book-keeping after a slot was written through the accessor."""
        self.heights[col] = self.rows - row
        self.empty_count -= 1
        if self._winner == 0:
            self._winner = self._check_after_move(row, col)

    # ------------------------------------------------------
    def is_final(self) -> bool:
        return self._winner != 0 or self.empty_count == 0

    def is_full(self) -> bool:
        return self.empty_count == 0

    def get_winner(self) -> int:
        return self._winner

    def occupied_count(self) -> int:
        return self.rows * self.cols - self.empty_count

    # ------------------------------------------------------
    def get_free_cols(self) -> List[int]:
        return np.flatnonzero(self.board[0] == EMPTY).tolist()

    def get_heights(self) -> List[int]:
        return self.heights.tolist()

    def copy(self) -> "ConnectState":
        return ConnectState(self.board.copy())


# ------------------------------------------------------
# Winning lines, computed once per board shape
# ------------------------------------------------------
_LINES_CACHE = {}


def _compute_lines(rows: int, cols: int) -> np.ndarray:
    key = (rows, cols)
    if key in _LINES_CACHE:
        return _LINES_CACHE[key]

    lines = []
    for r in range(rows):
        for c in range(cols):

            # Horizontal →
            if c + 3 < cols:
                lines.append([(r, c + i) for i in range(4)])

            # Vertical ↓
            if r + 3 < rows:
                lines.append([(r + i, c) for i in range(4)])

            # Diagonal ↘
            if r + 3 < rows and c + 3 < cols:
                lines.append([(r + i, c + i) for i in range(4)])

            # Diagonal ↙
            if r + 3 < rows and c - 3 >= 0:
                lines.append([(r + i, c - i) for i in range(4)])

    result = np.array(lines, dtype=np.intp).reshape(-1, 4, 2)
    _LINES_CACHE[key] = result
    return result
