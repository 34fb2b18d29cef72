import logging

import pytest
from pydantic import ValidationError

import run_match
from connect4.config import MatchConfig
from connect4.defensive_agent import DefensiveAgent
from connect4.match_log import read_log
from connect4.random_agent import RandomAgent
from connect4.render import format_board
from connect4.scanner import find_threat
from connect4.utils import find_agent
from tests.helpers import make_state


def test_config_defaults():
    config = MatchConfig()
    assert (config.rows, config.cols) == (6, 7)
    assert config.red == "defensive"
    assert config.yellow == "random"
    assert config.first_player_distribution == 0.5


@pytest.mark.parametrize(
    "overrides",
    [
        {"rows": 3},
        {"cols": 2},
        {"games": 0},
        {"first_player_distribution": 1.5},
        {"red": "minimax"},
    ],
)
def test_config_rejects_bad_values(overrides):
    with pytest.raises(ValidationError):
        MatchConfig(**overrides)


def test_find_agent_by_name():
    assert find_agent("defensive") is DefensiveAgent
    assert find_agent("random") is RandomAgent


def test_find_agent_rejects_unknown_name():
    with pytest.raises(ValueError, match="Unknown agent 'minimax'"):
        find_agent("minimax")


def test_cli_builds_config():
    args = run_match.parse_args(["--games", "4", "--red", "random", "--yellow", "defensive", "--seed", "1"])
    config = run_match.build_config(args)
    assert config.games == 4
    assert config.red == "random"
    assert config.yellow == "defensive"
    assert config.seed == 1


def test_main_writes_logs(tmp_path, capsys):
    match = run_match.main(["--games", "3", "--seed", "5", "--log-dir", str(tmp_path)])

    out = capsys.readouterr().out
    assert "=== MATCH FINISHED ===" in out

    games = read_log(str(tmp_path), "games.jsonl")
    assert [g["game"] for g in games] == [1, 2, 3]
    assert all(g["seed"] == 5 for g in games)

    matches = read_log(str(tmp_path), "matches.jsonl")
    assert len(matches) == 1
    assert matches[0]["red_wins"] == match.red_wins
    assert matches[0]["draws"] == match.draws


def test_main_show_prints_final_boards(tmp_path, capsys):
    run_match.main(["--games", "2", "--show", "--log-dir", str(tmp_path)])
    out = capsys.readouterr().out
    assert "--- Game 1" in out
    assert "--- Game 2" in out
    assert "0 1 2 3 4 5 6" in out


def test_read_log_missing_file(tmp_path):
    assert read_log(str(tmp_path), "games.jsonl") == []


def test_format_board_plain():
    text = format_board(make_state("RY.....").board, color=False)
    lines = text.splitlines()
    assert len(lines) == 7
    assert lines[0] == ". . . . . . ."
    assert lines[5] == "R Y . . . . ."
    assert lines[6] == "0 1 2 3 4 5 6"


def test_threats_are_logged(caplog):
    state = make_state(
        "..R....",
        "..R....",
        "..R....",
    )
    with caplog.at_level(logging.INFO, logger="connect4.scanner"):
        find_threat(state, True)
    assert "Vertical 3 in a row found in col 2" in caplog.text
