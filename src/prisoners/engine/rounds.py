"""Round engine: advance two strategy records by one round."""

from __future__ import annotations

import logging
import random

from prisoners.engine.resolution import pay, resolve_payoffs
from prisoners.models.matrices import PayoffMatrix
from prisoners.models.record import StrategyRecord
from prisoners.strategies.builtin import Strategy
from prisoners.strategies.registry import get_strategy, play

logger = logging.getLogger(__name__)


def play_round(
    record_a: StrategyRecord,
    record_b: StrategyRecord,
    matrix: PayoffMatrix,
    rng: random.Random,
    strategies: tuple[Strategy, Strategy] | None = None,
) -> tuple[StrategyRecord, StrategyRecord]:
    """Play one round between two strategies and award the payoffs.

    Both records are immutable, so a failure at any step leaves the inputs
    exactly as they were; a round either completes for both sides or not
    at all.

    Args:
        record_a: Side A's record before the round
        record_b: Side B's record before the round
        matrix: Payoff matrix for the match
        rng: Random source for non-deterministic strategies
        strategies: Pre-resolved (strategy_a, strategy_b); looked up from the
            registry by identity when omitted

    Returns:
        The two updated records, in input order

    Raises:
        UnknownStrategyError: If an identity has no registered strategy
    """
    if strategies is None:
        strategies = (get_strategy(record_a.identity), get_strategy(record_b.identity))
    strategy_a, strategy_b = strategies

    player_a = play(record_a, strategy_a, rng)
    player_b = play(record_b, strategy_b, rng)
    move_a = player_a.moves[-1]
    move_b = player_b.moves[-1]

    result = resolve_payoffs(move_a, move_b, matrix)
    logger.debug(
        f"Round {player_a.rounds_played + 1}: {record_a.identity}={move_a.symbol} "
        f"{record_b.identity}={move_b.symbol} -> {result.outcome.value} "
        f"({result.payoff_a}, {result.payoff_b})"
    )

    return (
        pay(player_a, result.payoff_a, matrix),
        pay(player_b, result.payoff_b, matrix),
    )
