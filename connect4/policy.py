from typing import Protocol

import numpy as np


class SlotAccessor(Protocol):
    def is_filled(self) -> bool: ...

    def is_red(self) -> bool: ...

    def set_red(self) -> None: ...

    def set_yellow(self) -> None: ...


class ColumnAccessor(Protocol):
    def get_slot(self, row: int) -> SlotAccessor: ...


class BoardAccessor(Protocol):
    """What an agent may see of the host's board."""

    def column_count(self) -> int: ...

    def row_count(self) -> int: ...

    def get_column(self, col: int) -> ColumnAccessor: ...


class Agent(Protocol):
    """
    Anything the game runner can seat at the table.

    Agents are built as ``cls(board, is_red, rng)`` and must place exactly
    one token per ``move()`` call.
    """

    def move(self) -> None: ...

    def name(self) -> str: ...


class BoardFullError(ValueError):
    """Raised when an agent is asked to move with no open column left."""


def make_rng(rng: np.random.Generator | int | None) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def lowest_empty_index(column: ColumnAccessor, row_count: int) -> int:
    """
    Index of the lowest empty slot in ``column``; -1 if the column is full.

    Walks the whole column and keeps the last empty slot seen, so a column
    with a gap below a token still yields its lowest empty row.
    """
    lowest = -1
    for row in range(row_count):
        if not column.get_slot(row).is_filled():
            lowest = row
    return lowest


def open_columns(board: BoardAccessor) -> list[int]:
    rows = board.row_count()
    return [
        col for col in range(board.column_count())
        if lowest_empty_index(board.get_column(col), rows) != -1
    ]
