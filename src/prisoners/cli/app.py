"""Command-line interface for playing a single match.

Usage:
    prisoners 10 cheat tit-for-tat
    prisoners 20 random pavlov --seed 42 --json
    prisoners 5 sucker cheat --partner 4 --backstabber 6

Or directly:
    python -m prisoners.cli.app 10 grudger pavlov
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from prisoners.config import get_payoff_parameters
from prisoners.engine.match import MatchResult, run_match
from prisoners.models.matrices import PayoffParameters, build_payoff_matrix
from prisoners.strategies.registry import list_strategies

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prisoners",
        description="Play an iterated Prisoner's Dilemma match between two strategies",
    )
    parser.add_argument("rounds", type=int, nargs="?", help="Number of rounds to play")
    parser.add_argument("strategy_a", nargs="?", help="Strategy for side A")
    parser.add_argument("strategy_b", nargs="?", help="Strategy for side B")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (default: PRISONERS_SEED)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full match result as JSON",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available strategies and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every round",
    )
    for name in ("sucker", "defector", "partner", "backstabber"):
        parser.add_argument(
            f"--{name}",
            type=int,
            default=None,
            help=f"Override the {name} payoff",
        )
    return parser


def print_running_scores(result: MatchResult) -> None:
    """Print a per-round table of cumulative points."""
    a, b = result.record_a, result.record_b
    score_a, score_b = result.running_scores

    print(f"\n{'Round':>5}  {a.title:>20}  {b.title:>20}")
    print("-" * 49)
    for i, (move_a, move_b, total_a, total_b) in enumerate(
        zip(a.moves, b.moves, score_a, score_b), start=1
    ):
        print(f"{i:>5}  {move_a.symbol:>2} {total_a:>17}  {move_b.symbol:>2} {total_b:>17}")
    print("-" * 49)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the CLI application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.list:
        for name in list_strategies():
            print(name)
        return 0

    if args.rounds is None or args.strategy_b is None:
        parser.print_usage(sys.stderr)
        print("error: ROUNDS, STRATEGY_A and STRATEGY_B are required", file=sys.stderr)
        return 2

    overrides = {
        name: getattr(args, name)
        for name in ("sucker", "defector", "partner", "backstabber")
        if getattr(args, name) is not None
    }

    try:
        params = get_payoff_parameters()
        if overrides:
            params = PayoffParameters(**{**params.model_dump(), **overrides})
        matrix = build_payoff_matrix(params)
        result = run_match(args.rounds, args.strategy_a, args.strategy_b, matrix=matrix, seed=args.seed)
    except (ValueError, ValidationError) as e:
        logger.debug("Match rejected", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    print_running_scores(result)
    for line in result.report():
        print(line)
    print(result.winner)
    return 0


if __name__ == "__main__":
    sys.exit(main())
