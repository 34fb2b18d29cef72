import pytest

from connect4.policy import BoardFullError
from connect4.random_agent import RandomAgent
from tests.helpers import full_board, make_state


def test_random_agent_only_plays_open_columns():
    state = make_state(
        "RYRYRY.",
        "YRYRYR.",
        "RYRYRY.",
        "YRYRYR.",
        "RYRYRY.",
        "YRYRYR.",
    )
    agent = RandomAgent(state, is_red=True, rng=3)

    agent.move()

    assert state.board[5, 6] == 1


def test_random_agent_on_full_board_raises():
    agent = RandomAgent(full_board(), is_red=False, rng=0)
    with pytest.raises(BoardFullError):
        agent.move()


def test_random_agent_name():
    assert RandomAgent(full_board(), is_red=True).name() == "Random Agent"
