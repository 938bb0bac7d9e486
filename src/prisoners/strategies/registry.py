"""Strategy registry for the iterated Prisoner's Dilemma.

Maps strategy identifiers to decision functions. Adding a strategy means
adding one entry to STRATEGIES; nothing in the engine needs to change.
"""

from __future__ import annotations

import random

from prisoners.models.record import StrategyRecord
from prisoners.strategies.builtin import (
    Strategy,
    always_cooperate,
    always_defect,
    grudger,
    pavlov,
    random_strategy,
    tit_for_tat,
)


class UnknownStrategyError(ValueError):
    """No decision function is registered for a strategy identifier."""


# Registry of built-in strategies
STRATEGIES: dict[str, Strategy] = {
    "sucker": always_cooperate,
    "cheat": always_defect,
    "defector": always_defect,
    "tit-for-tat": tit_for_tat,
    "grudger": grudger,
    "random": random_strategy,
    "pavlov": pavlov,
}


def normalize_identifier(name: str) -> str:
    """Normalize a strategy name to its registry form.

    Lowercases, maps underscores and spaces to hyphens, and drops a leading
    colon so ":tit-for-tat", "Tit_For_Tat" and "tit for tat" all resolve
    to "tit-for-tat".
    """
    return name.strip().lstrip(":").lower().replace("_", "-").replace(" ", "-")


def get_strategy(name: str) -> Strategy:
    """Look up the decision function for a strategy identifier.

    Args:
        name: Strategy identifier, in any spelling accepted by normalize_identifier

    Returns:
        The registered strategy function

    Raises:
        UnknownStrategyError: If no strategy is registered under the name
    """
    if not isinstance(name, str):
        raise UnknownStrategyError(
            f"Strategy identifier must be a string, got {name!r}. Valid strategies: {list_strategies()}"
        )
    strategy = STRATEGIES.get(normalize_identifier(name))
    if strategy is None:
        raise UnknownStrategyError(
            f"Unknown strategy: {name}. Valid strategies: {list_strategies()}"
        )
    return strategy


def list_strategies() -> list[str]:
    """List all registered strategy identifiers."""
    return sorted(STRATEGIES)


def play(record: StrategyRecord, strategy: Strategy, rng: random.Random) -> StrategyRecord:
    """Choose the next move for a record and append it.

    Only `moves` changes; points and beliefs are carried over untouched.
    """
    move = strategy(record.moves, record.beliefs, rng)
    return record.with_move(move)
