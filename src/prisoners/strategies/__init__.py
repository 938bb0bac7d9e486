"""Strategy implementations for the iterated Prisoner's Dilemma.

Strategies are pure decision functions over a record's own history:

    from prisoners.strategies import get_strategy

    strategy = get_strategy("tit-for-tat")
    move = strategy(record.moves, record.beliefs, rng)
"""

from prisoners.strategies.builtin import (
    Strategy,
    always_cooperate,
    always_defect,
    grudger,
    pavlov,
    random_strategy,
    tit_for_tat,
)
from prisoners.strategies.registry import (
    STRATEGIES,
    UnknownStrategyError,
    get_strategy,
    list_strategies,
    normalize_identifier,
    play,
)

__all__ = [
    # Type alias
    "Strategy",
    # Registry
    "STRATEGIES",
    "UnknownStrategyError",
    "get_strategy",
    "list_strategies",
    "normalize_identifier",
    "play",
    # Built-in strategies
    "always_cooperate",
    "always_defect",
    "tit_for_tat",
    "grudger",
    "random_strategy",
    "pavlov",
]
