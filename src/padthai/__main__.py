"""Command line entry point for Pad Thai checkers."""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from .board import Board
from .movegen import has_legal_moves
from .types import Player
from .config import Config, get_config, set_config
from .utils import setup_logger
from .ai.search import difficulty_settings, searcher_from_config


def load_board(path: Path) -> Board:
    """Load a board from a compact YAML or JSON file."""
    with open(path, 'r') as f:
        if path.suffix == '.json':
            data = json.load(f)
        else:
            data = yaml.safe_load(f)
    return Board.from_compact(data or {})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="padthai",
        description="Suggest a checkers move for a board position.",
    )
    parser.add_argument("--board", type=Path, default=None,
                        help="Compact board file (YAML or JSON); defaults to the initial position")
    parser.add_argument("--player", choices=["white", "black"], default="white",
                        help="Side to move")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--depth", type=int, default=None, help="Search depth in plies")
    group.add_argument("--difficulty", choices=["easy", "medium", "hard", "custom"], default=None,
                       help="Difficulty level (overrides the configured one)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for tie-breaking")
    parser.add_argument("--config", type=Path, default=None, help="Settings file")
    parser.add_argument("--log-level", default=None, help="Logging level, e.g. DEBUG")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.config is not None:
        set_config(Config.load(args.config))
    config = get_config()

    setup_logger(
        "padthai",
        log_file=config.logging.log_file,
        level=args.log_level or config.logging.level,
    )

    board = load_board(args.board) if args.board else Board.initial()
    player = Player.WHITE if args.player == "white" else Player.BLACK

    print(board)
    print()

    if args.depth is not None:
        depth, weights = args.depth, config.evaluation.to_weights()
    else:
        depth, weights = difficulty_settings(args.difficulty or config.search.difficulty, config=config)

    searcher = searcher_from_config(config, weights, seed=args.seed)
    move = searcher.search(board, player, depth).move

    if move is None:
        if has_legal_moves(board, player):
            print(f"{player.name.title()} loses whatever it plays.")
        else:
            print(f"{player.name.title()} has no legal move.")
        return 1

    print(f"{player.name.title()} plays {move!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
