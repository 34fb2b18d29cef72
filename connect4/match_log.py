import json
import os

from connect4.dtos import Game, Match


def _append(log_dir: str, filename: str, entry: dict):
    os.makedirs(log_dir, exist_ok=True)
    with open(os.path.join(log_dir, filename), "a") as f:
        f.write(json.dumps(entry) + "\n")


def log_game(log_dir: str, seed: int, index: int, game: Game):
    entry = {
        "seed": seed,
        "game": index,
        "red": game.player_red,
        "yellow": game.player_yellow,
        "first": game.first,
        "moves": len(game.history),
        "winner": game.winner,
        "invalid_move": game.invalid_move,
    }
    _append(log_dir, "games.jsonl", entry)


def log_match(log_dir: str, seed: int, match: Match):
    entry = {
        "seed": seed,
        "red": match.player_red,
        "yellow": match.player_yellow,
        "red_wins": match.red_wins,
        "yellow_wins": match.yellow_wins,
        "draws": match.draws,
    }
    _append(log_dir, "matches.jsonl", entry)


def read_log(log_dir: str, filename: str) -> list:
    path = os.path.join(log_dir, filename)
    if not os.path.exists(path):
        return []
    with open(path, "r") as f:
        return [json.loads(line) for line in f if line.strip()]
