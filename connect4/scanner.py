"""
Detection of three-in-a-row patterns that are one drop away from four.

Every detector takes a board accessor and the color to look for
(``is_red``) and returns the column that completes the pattern, or
``None``.  Horizontal and diagonal lines share one walker; only the start
cell and the direction vector differ.
"""

import logging
from typing import Iterator, Optional, Tuple

from connect4.policy import BoardAccessor, lowest_empty_index

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

# (d_row, d_col); rows grow downwards
RIGHT = (0, 1)
UP_RIGHT = (-1, 1)
UP_LEFT = (-1, -1)


def walk(board: BoardAccessor, start: Cell, direction: Tuple[int, int]) -> Iterator[Cell]:
    """Yield cells from ``start`` along ``direction`` until leaving the board."""
    rows, cols = board.row_count(), board.column_count()
    row, col = start
    d_row, d_col = direction
    while 0 <= row < rows and 0 <= col < cols:
        yield row, col
        row += d_row
        col += d_col


# ============================================================
# Vertical
# ============================================================
def find_vertical_threat(board: BoardAccessor, is_red: bool) -> Optional[int]:
    rows = board.row_count()

    for col in range(board.column_count()):
        column = board.get_column(col)
        if lowest_empty_index(column, rows) == -1:
            continue  # full, nothing lands here

        piece_count = 0
        for row in range(rows - 1, -1, -1):
            slot = column.get_slot(row)
            if not slot.is_filled():
                continue
            if slot.is_red() == is_red:
                piece_count += 1
            else:
                piece_count = 0

        if piece_count == 3:
            logger.info("Vertical 3 in a row found in col %d", col)
            return col

    return None


# ============================================================
# Line walker (horizontal and diagonals)
# ============================================================
def scan_line(board: BoardAccessor, start: Cell, direction: Tuple[int, int], is_red: bool) -> Optional[Cell]:
    """
    Walk one line looking for three pieces of one color plus a playable gap.

    At most one gap may sit between the pieces (``X _ X X``); after two
    empty slots in adjacent columns the second one becomes the end gap.  An
    empty slot only counts as a gap when a token would rest there now: it is
    on the bottom row or the slot beneath it is filled.  An unplayable empty
    slot clears everything seen so far.  Gap positions are compared by
    column index, so on lines walking leftwards the adjacency checks never
    match.

    Returns the (row, col) of the gap, or ``None``.
    """
    bottom = board.row_count() - 1

    piece_count = 0
    blank_col = -1           # column of the candidate gap
    blank_row = -1
    blank_in_line = False    # the gap sits between pieces already counted

    for row, col in walk(board, start, direction):
        slot = board.get_column(col).get_slot(row)

        if slot.is_filled():
            if slot.is_red() == is_red:
                piece_count += 1
            else:
                piece_count = 0
                blank_col = -1
                blank_in_line = False

        elif blank_in_line and blank_col == col - 1:
            # two gaps side by side: this one becomes the new end gap
            blank_col, blank_row = col, row
            blank_in_line = False

        elif blank_in_line:
            # only the pieces after the previous gap still count
            piece_count = col - (blank_col + 1)
            blank_col, blank_row = col, row

        elif row < bottom:
            if board.get_column(col).get_slot(row + 1).is_filled():
                blank_col, blank_row = col, row
                if piece_count > 0:
                    blank_in_line = True
            else:
                # filling beneath would hand over the win
                blank_col = -1
                blank_in_line = False
                piece_count = 0

        else:
            blank_col, blank_row = col, row
            if piece_count > 0:
                blank_in_line = True

        if piece_count == 3 and blank_col >= 0:
            return blank_row, blank_col

    return None


# ============================================================
# Horizontal
# ============================================================
def find_horizontal_threat(board: BoardAccessor, is_red: bool) -> Optional[int]:
    for row in range(board.row_count() - 1, -1, -1):
        hit = scan_line(board, (row, 0), RIGHT, is_red)
        if hit is not None:
            logger.info("Horizontal 3 in a row block found in row %d col %d", row, hit[1])
            return hit[1]
    return None


# ============================================================
# Diagonals
# ============================================================
def diagonal_anchors(board: BoardAccessor) -> Iterator[Tuple[Cell, Tuple[int, int]]]:
    """
    Start cells and directions of every diagonal at least four long.

    Forward diagonals (up and to the right) come first, then backward ones
    (up and to the left); within each, the bottom start row goes first.
    """
    rows, cols = board.row_count(), board.column_count()

    for start_row in range(rows - 1, 2, -1):
        for start_col in range(0, cols - 3):
            yield (start_row, start_col), UP_RIGHT

    for start_row in range(rows - 1, 2, -1):
        for start_col in range(cols - 1, 2, -1):
            yield (start_row, start_col), UP_LEFT


def find_diagonal_threat(board: BoardAccessor, is_red: bool) -> Optional[int]:
    for start, direction in diagonal_anchors(board):
        hit = scan_line(board, start, direction, is_red)
        if hit is not None:
            logger.info("Diagonal 3 in a row block found in row %d col %d", hit[0], hit[1])
            return hit[1]
    return None


# ============================================================
# Threat selection
# ============================================================
DETECTORS = (find_vertical_threat, find_horizontal_threat, find_diagonal_threat)


def find_threat(board: BoardAccessor, is_red: bool) -> Optional[int]:
    """First completing column for ``is_red``: vertical, then horizontal, then diagonal."""
    for detector in DETECTORS:
        col = detector(board, is_red)
        if col is not None:
            return col
    return None
