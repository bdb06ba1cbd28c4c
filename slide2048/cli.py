"""
Slide2048 CLI - Replay move sequences against the engine.

Usage:
    slide2048 new [--seed N] [--json]                  Show an opening board
    slide2048 simulate MOVE... [--seed N] [--json]     Apply moves in order

Moves are left, right, up or down.
"""

import argparse
import logging
import sys

from .config import EngineConfig
from .engine_core import Direction, GameEngine, Grid, InvalidDirectionError


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Slide2048 - Sliding-block puzzle engine",
        prog="slide2048",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # New game command
    new_parser = subparsers.add_parser("new", help="Show an opening board")
    new_parser.add_argument("--seed", type=int, help="Seed for tile placement")
    new_parser.add_argument("--json", action="store_true", help="Print a JSON snapshot")

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Apply a sequence of moves")
    simulate_parser.add_argument("moves", nargs="*", help="Directions: left, right, up, down")
    simulate_parser.add_argument("--seed", type=int, help="Seed for tile placement")
    simulate_parser.add_argument("--json", action="store_true", help="Print a JSON report")

    args = parser.parse_args(argv)

    config = EngineConfig.from_env()
    logging.basicConfig(level=config.log_level)

    if args.command == "new":
        cmd_new(args, config)
    elif args.command == "simulate":
        cmd_simulate(args, config)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_new(args, config):
    """Print the board right after a new game."""
    from .api.schemas import BoardSnapshot

    engine = _make_engine(args, config)
    if args.json:
        print(BoardSnapshot.from_engine(engine).model_dump_json(indent=2))
    else:
        print(format_board(engine.block_matrix))


def cmd_simulate(args, config):
    """Apply each move in order and print the result."""
    from .api.schemas import BoardSnapshot, MoveSummary, SimulationReport

    try:
        directions = [Direction.parse(m) for m in args.moves]
    except InvalidDirectionError as e:
        print(f"Error: {e}")
        sys.exit(1)

    engine = _make_engine(args, config)
    summaries = [MoveSummary.from_result(engine.move(d)) for d in directions]

    if args.json:
        report = SimulationReport(
            seed=engine.config.random_seed,
            moves=summaries,
            board=BoardSnapshot.from_engine(engine),
        )
        print(report.model_dump_json(indent=2))
        return

    for summary in summaries:
        status = "moved" if summary.changed else "no change"
        print(f"{summary.direction.value:>5}: {status}, {summary.merges} merge(s)")
    print()
    print(format_board(engine.block_matrix))


def format_board(grid: Grid) -> str:
    """Plain-text board, one row per line, '.' for empty cells."""
    lines = []
    for row in grid.values():
        lines.append(" ".join(f"{value if value else '.':>5}" for value in row))
    return "\n".join(lines)


def _make_engine(args, config: EngineConfig) -> GameEngine:
    if args.seed is not None:
        config.random_seed = args.seed
    return GameEngine(config=config)


if __name__ == "__main__":
    main()
