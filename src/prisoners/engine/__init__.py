"""Game engine module for the iterated Prisoner's Dilemma.

This module contains the core game logic including:
- resolution: Outcome classification, scoring and belief inference
- rounds: Single-round advancement of two strategy records
- match: Match loop and summary functions

Usage:
    from prisoners.engine import run_match

    result = run_match(10, "grudger", "pavlov", seed=42)
    print(result.totals)
    print(result.winner)
"""

from prisoners.engine.match import (
    InvalidRoundCountError,
    MatchOutcome,
    MatchResult,
    compare,
    initiate_match,
    report,
    run_match,
    running_score,
    total,
    winner,
)
from prisoners.engine.resolution import (
    Outcome,
    RoundPayoffs,
    classify_outcome,
    infer_opponent_move,
    pay,
    resolve_payoffs,
    score_outcome,
)
from prisoners.engine.rounds import play_round

__all__ = [
    # Match driver
    "initiate_match",
    "run_match",
    "MatchResult",
    "MatchOutcome",
    "InvalidRoundCountError",
    # Summary functions
    "running_score",
    "total",
    "compare",
    "winner",
    "report",
    # Round engine
    "play_round",
    # Payoff engine
    "Outcome",
    "RoundPayoffs",
    "classify_outcome",
    "infer_opponent_move",
    "pay",
    "resolve_payoffs",
    "score_outcome",
]
