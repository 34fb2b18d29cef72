import numpy as np

from connect4.connect_state import RED, YELLOW

# ================================
# ANSI colors
# ================================
RED_ANSI = "\033[91m"
YELLOW_ANSI = "\033[93m"
GRAY = "\033[90m"
RESET = "\033[0m"


def format_board(board, color: bool = True) -> str:
    """Text grid of a board (array or nested lists), top row first."""
    grid = np.asarray(board)
    cells = {
        RED: (RED_ANSI + "● " + RESET) if color else "R ",
        YELLOW: (YELLOW_ANSI + "● " + RESET) if color else "Y ",
    }
    empty = (GRAY + "· " + RESET) if color else ". "

    lines = ["".join(cells.get(int(x), empty) for x in row).rstrip() for row in grid]
    lines.append(" ".join(str(c) for c in range(grid.shape[1])))
    return "\n".join(lines)
