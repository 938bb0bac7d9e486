"""Iterated Prisoner's Dilemma simulation.

Two strategies play a fixed number of rounds; each round is scored by a
payoff matrix and each strategy infers its opponent's move from its own
payoff.

Usage:
    from prisoners import initiate_match, running_score, winner

    a, b = initiate_match(2, "cheat", "tit-for-tat")
    running_score(a)  # [5, 6]
    winner(a, b)      # "cheat wins!"
"""

from prisoners.engine import (
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
from prisoners.models import (
    InvalidPayoffConfigurationError,
    Move,
    PayoffMatrix,
    PayoffParameters,
    StrategyRecord,
    build_payoff_matrix,
)
from prisoners.strategies import (
    STRATEGIES,
    UnknownStrategyError,
    get_strategy,
    list_strategies,
)

__version__ = "0.1.0"
__all__ = [
    # Match driver
    "initiate_match",
    "run_match",
    "MatchResult",
    "MatchOutcome",
    "running_score",
    "total",
    "compare",
    "winner",
    "report",
    # Models
    "Move",
    "StrategyRecord",
    "PayoffParameters",
    "PayoffMatrix",
    "build_payoff_matrix",
    # Strategies
    "STRATEGIES",
    "get_strategy",
    "list_strategies",
    # Errors
    "UnknownStrategyError",
    "InvalidRoundCountError",
    "InvalidPayoffConfigurationError",
]
