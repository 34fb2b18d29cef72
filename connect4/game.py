import logging
from typing import Optional, Tuple

import numpy as np

from connect4.config import MatchConfig
from connect4.connect_state import EMPTY, RED, YELLOW, ConnectState, color_value
from connect4.dtos import Game, Match
from connect4.utils import find_agent

logger = logging.getLogger(__name__)


class InvalidMoveError(ValueError):
    """An agent's turn left the board in a state a single legal drop cannot produce."""


# ------------------------------------------------------------
# Move validation
# ------------------------------------------------------------
def validate_move(before: np.ndarray, after: np.ndarray, is_red: bool) -> Tuple[int, int]:
    """
    Compare the board around one turn and return the (row, col) played.

    A move is rejected when:
    - no token was placed
    - a token was removed, or changed color
    - more than one token was placed
    - the new token is not the mover's color
    - there are empty spaces below the new token
    """
    changed = np.argwhere(before != after)
    if changed.size == 0:
        raise InvalidMoveError("No token was placed.")

    for r, c in changed:
        if before[r, c] != EMPTY:
            if after[r, c] == EMPTY:
                raise InvalidMoveError(f"A token was removed from row {r} col {c}.")
            raise InvalidMoveError(f"The token at row {r} col {c} changed color.")

    if len(changed) > 1:
        raise InvalidMoveError(f"{len(changed)} tokens were placed.")

    row, col = (int(x) for x in changed[0])
    if after[row, col] != color_value(is_red):
        raise InvalidMoveError(f"The token at row {row} col {col} has the wrong color.")
    if row + 1 < after.shape[0] and after[row + 1, col] == EMPTY:
        raise InvalidMoveError(f"There are empty spaces below row {row} col {col}.")

    return row, col


def _side(is_red: bool) -> str:
    return "red" if is_red else "yellow"


def _child_rng(rng: np.random.Generator) -> np.random.Generator:
    return np.random.default_rng(int(rng.integers(2**32)))


# ------------------------------------------------------------
# One game (red vs yellow)
# ------------------------------------------------------------
def play_single_game(red_cls, yellow_cls, config: MatchConfig, rng: np.random.Generator, red_first: bool) -> Game:
    """
    Seat both agents on a fresh board and alternate ``move()`` calls until
    someone connects four, the board fills up, or a move is rejected.
    A rejected move ends the game as a loss for the offender.
    """
    state = ConnectState(rows=config.rows, cols=config.cols)
    agents = {
        True: red_cls(state, True, _child_rng(rng)),
        False: yellow_cls(state, False, _child_rng(rng)),
    }

    game = Game(player_red=config.red, player_yellow=config.yellow, first=_side(red_first))
    is_red = red_first

    while not state.is_final():
        agent = agents[is_red]
        before = state.board.copy()

        try:
            agent.move()
            row, col = validate_move(before, state.board, is_red)
        except ValueError as e:
            # InvalidMoveError, or a slot write the board refused
            logger.warning("Invalid move by %s (%s): %s", agent.name(), _side(is_red), e)
            game.invalid_move = f"{_side(is_red)}: {e}"
            game.winner = _side(not is_red)
            game.final_board = state.board.tolist()
            return game

        game.history.append((before.tolist(), col))
        state.register_move(row, col)
        is_red = not is_red

    winner = state.get_winner()
    if winner == RED:
        game.winner = "red"
    elif winner == YELLOW:
        game.winner = "yellow"
    game.final_board = state.board.tolist()

    logger.debug("Game over after %d moves, winner: %s", len(game.history), game.winner)
    return game


# ------------------------------------------------------------
# A series of games
# ------------------------------------------------------------
def play_match(config: MatchConfig, red_cls: Optional[type] = None, yellow_cls: Optional[type] = None) -> Match:
    rng = np.random.default_rng(config.seed)
    red_cls = red_cls or find_agent(config.red)
    yellow_cls = yellow_cls or find_agent(config.yellow)

    match = Match(player_red=config.red, player_yellow=config.yellow)

    for _ in range(config.games):
        red_first = bool(rng.random() < config.first_player_distribution)
        match.record(play_single_game(red_cls, yellow_cls, config, rng, red_first))

    return match
