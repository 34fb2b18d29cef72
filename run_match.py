# ============================================================
#                   RUN_MATCH.PY — agent vs agent
# ============================================================

import argparse
import logging

from connect4.config import MatchConfig
from connect4.game import play_match
from connect4.match_log import log_game, log_match
from connect4.render import format_board
from connect4.utils import AGENTS


# ============================================================
# Match run
# ============================================================
def run(config: MatchConfig):
    match = play_match(config)

    for i, game in enumerate(match.games, start=1):
        log_game(config.log_dir, config.seed, i, game)
    log_match(config.log_dir, config.seed, match)

    return match


# ============================================================
# CLI
# ============================================================
def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Connect4 agents against each other.")
    parser.add_argument("--red", choices=sorted(AGENTS), default="defensive")
    parser.add_argument("--yellow", choices=sorted(AGENTS), default="random")
    parser.add_argument("--games", type=int, default=10)
    parser.add_argument("--rows", type=int, default=6)
    parser.add_argument("--cols", type=int, default=7)
    parser.add_argument("--first-player-distribution", type=float, default=0.5)
    parser.add_argument("--seed", type=int, default=911)
    parser.add_argument("--log-dir", default="match_logs")
    parser.add_argument("--show", action=argparse.BooleanOptionalAction, default=False)
    parser.add_argument("-v", "--verbose", action="store_true", help="log every threat the agents spot")
    return parser.parse_args(argv)


def build_config(args) -> MatchConfig:
    return MatchConfig(
        rows=args.rows,
        cols=args.cols,
        games=args.games,
        seed=args.seed,
        first_player_distribution=args.first_player_distribution,
        red=args.red,
        yellow=args.yellow,
        log_dir=args.log_dir,
        show=args.show,
    )


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = build_config(args)
    match = run(config)

    if config.show:
        for i, game in enumerate(match.games, start=1):
            print(f"--- Game {i} ({game.first} first) ---")
            print(format_board(game.final_board))
            print(f"Winner: {game.winner_name() or 'draw'}")
            if game.invalid_move:
                print(f"Invalid move: {game.invalid_move}")
            print()

    print("=== MATCH FINISHED ===")
    print(f"Red    ({match.player_red}): {match.red_wins} wins")
    print(f"Yellow ({match.player_yellow}): {match.yellow_wins} wins")
    print(f"Draws: {match.draws}")
    print(f"Logs saved in {config.log_dir}/")
    return match


if __name__ == "__main__":
    main()
