"""
Command-line entry point for replaying Trax games.

Usage:
    python -m trax.main game.yaml
    python -m trax.main game.yaml --moves --verbose
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from .environment import ReplayConfig, TraxGame
from .utils.grid_visualizer import render_board


def load_config(config_path: str) -> ReplayConfig:
    """Load a replay configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return ReplayConfig(**data)


def main():
    parser = argparse.ArgumentParser(
        description="Replay a Trax game and report the result",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example game.yaml:
  game:
    max_extent: 8
    loop_variant: false
  moves:
    - "@0+"
    - "a0/"
        """
    )
    parser.add_argument(
        "config",
        help="Path to YAML file with the game configuration and moves"
    )
    parser.add_argument(
        "--moves",
        action="store_true",
        help="List the legal moves for the player to move"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log each committed move"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    game = TraxGame.create(config=config.game)
    for i, move in enumerate(config.moves, start=1):
        validation = game.play(move)
        if not validation.valid:
            print(f"Move {i} '{move}' rejected: {validation.error.message}", file=sys.stderr)
            return 1
        if not validation.complete:
            print(f"Move {i} '{move}' is incomplete: a cell is required", file=sys.stderr)
            return 1

    highlight = [cell for line in game.result.lines for cell in line.cells]
    print(render_board(game.board, highlight))

    print()
    print("=== Game Summary ===")
    print(f"Moves played: {len(game.history)}")
    print(f"Tiles on board: {len(game.board)}")
    if game.gameover:
        print(f"End reason: {game.end_reason}")
        print(f"Winners: {', '.join(str(p) for p in game.winners)}")
        for line in game.result.lines:
            cells = ' '.join(game.board.abs_to_notation(x, y) for x, y in line.cells)
            print(f"  Player {line.player} {line.kind}: {cells}")
    else:
        print(f"Player to move: {game.current_player}")

    if args.moves and not game.gameover:
        print()
        print("Legal moves:")
        for legal in game.legal_moves():
            suffix = f" (forces {len(legal.forced)})" if legal.forced else ""
            print(f"  {legal.move}{suffix}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
