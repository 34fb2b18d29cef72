import numpy as np

from connect4.connect_state import ConnectState

CELLS = {"R": 1, "Y": -1, ".": 0}


def make_state(*rows: str) -> ConnectState:
    """
    Build a board from a top-to-bottom diagram, e.g.::

        make_state(
            ".......",
            "..R....",
            "RYR....",
        )

    Missing rows on top are filled with empty slots up to 6 rows.
    """
    grid = [[CELLS[ch] for ch in row.replace(" ", "")] for row in rows]
    cols = len(grid[0])
    while len(grid) < ConnectState.ROWS:
        grid.insert(0, [0] * cols)
    return ConnectState(np.array(grid, dtype=np.int8))


def full_board(rows: int = 6, cols: int = 7) -> ConnectState:
    # every slot filled
    grid = np.empty((rows, cols), dtype=np.int8)
    for r in range(rows):
        for c in range(cols):
            grid[r, c] = 1 if ((c // 2) + (r // 3)) % 2 == 0 else -1
    return ConnectState(grid)
