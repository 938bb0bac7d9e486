"""Match driver for the iterated Prisoner's Dilemma.

Plays a fixed number of rounds between two named strategies and derives
summary values from the final records.

Usage:
    from prisoners.engine import initiate_match, total, winner

    a, b = initiate_match(10, "cheat", "tit-for-tat")
    print(total(a), total(b), winner(a, b))
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from itertools import accumulate
from typing import Iterable, Optional

from prisoners.config import get_default_matrix, get_seed
from prisoners.engine.rounds import play_round
from prisoners.models.matrices import PayoffMatrix
from prisoners.models.record import StrategyRecord
from prisoners.strategies.registry import get_strategy, normalize_identifier

logger = logging.getLogger(__name__)


class InvalidRoundCountError(ValueError):
    """The requested number of rounds is not a non-negative integer."""


class MatchOutcome(Enum):
    """Which side finished with more points."""

    A_WINS = "a_wins"
    B_WINS = "b_wins"
    TIE = "tie"


# =============================================================================
# Summary Functions
# =============================================================================


def running_score(record: StrategyRecord) -> list[int]:
    """Cumulative points after each round (prefix sums of points)."""
    return list(accumulate(record.points))


def total(record: StrategyRecord) -> int:
    """Sum of all points received."""
    return sum(record.points)


def compare(a: StrategyRecord, b: StrategyRecord) -> MatchOutcome:
    """Compare final totals of two records."""
    total_a, total_b = total(a), total(b)
    if total_a > total_b:
        return MatchOutcome.A_WINS
    if total_a < total_b:
        return MatchOutcome.B_WINS
    return MatchOutcome.TIE


def winner(a: StrategyRecord, b: StrategyRecord) -> str:
    """Describe the winning strategy, e.g. "cheat wins!" or "tie!".

    Depends only on the totals, so winner(a, b) == winner(b, a).
    """
    outcome = compare(a, b)
    if outcome == MatchOutcome.A_WINS:
        return f"{a.identity} wins!"
    if outcome == MatchOutcome.B_WINS:
        return f"{b.identity} wins!"
    return "tie!"


def report(records: Iterable[StrategyRecord]) -> list[str]:
    """One "<Title>: <total> points" line per record."""
    return [f"{r.title}: {total(r)} points" for r in records]


# =============================================================================
# Match Execution
# =============================================================================


def _validate_rounds(rounds: int) -> None:
    if isinstance(rounds, bool) or not isinstance(rounds, int):
        raise InvalidRoundCountError(f"rounds must be an integer, got {rounds!r}")
    if rounds < 0:
        raise InvalidRoundCountError(f"rounds must be non-negative, got {rounds}")


def initiate_match(
    rounds: int,
    identifier_a: str,
    identifier_b: str,
    matrix: Optional[PayoffMatrix] = None,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> tuple[StrategyRecord, StrategyRecord]:
    """Play a given number of rounds between two named strategies.

    All preconditions are checked before the first round, so an invalid
    match fails without playing anything.

    Args:
        rounds: Number of rounds to play (0 returns the empty records)
        identifier_a: Strategy identifier for side A
        identifier_b: Strategy identifier for side B
        matrix: Payoff matrix (built from environment config if not provided)
        rng: Random source for the random strategy
        seed: Seed for a fresh random source when rng is not provided
            (falls back to PRISONERS_SEED)

    Returns:
        Final (record_a, record_b)

    Raises:
        InvalidRoundCountError: If rounds is negative or not an integer
        UnknownStrategyError: If either identifier is not registered
        InvalidPayoffConfigurationError: If the configured payoffs are invalid
    """
    record_a, record_b, _ = _play_match(rounds, identifier_a, identifier_b, matrix, rng, seed)
    return record_a, record_b


def _play_match(rounds, identifier_a, identifier_b, matrix, rng, seed):
    """Check preconditions, play the match and return both records with the matrix used."""
    _validate_rounds(rounds)
    strategies = (get_strategy(identifier_a), get_strategy(identifier_b))
    if matrix is None:
        matrix = get_default_matrix()
    if rng is None:
        rng = random.Random(seed if seed is not None else get_seed())

    record_a = StrategyRecord.empty(normalize_identifier(identifier_a))
    record_b = StrategyRecord.empty(normalize_identifier(identifier_b))

    logger.info(f"Starting match: {record_a.identity} vs {record_b.identity}, {rounds} rounds")
    for _ in range(rounds):
        record_a, record_b = play_round(record_a, record_b, matrix, rng, strategies)
    logger.info(
        f"Match finished: {record_a.identity} {total(record_a)}, "
        f"{record_b.identity} {total(record_b)} ({winner(record_a, record_b)})"
    )

    return record_a, record_b, matrix


@dataclass(frozen=True)
class MatchResult:
    """Result of a completed match.

    Wraps the final pair of records with the matrix they were scored under.
    """

    record_a: StrategyRecord
    record_b: StrategyRecord
    rounds: int
    matrix: PayoffMatrix

    @property
    def totals(self) -> tuple[int, int]:
        return total(self.record_a), total(self.record_b)

    @property
    def running_scores(self) -> tuple[list[int], list[int]]:
        return running_score(self.record_a), running_score(self.record_b)

    @property
    def outcome(self) -> MatchOutcome:
        return compare(self.record_a, self.record_b)

    @property
    def winner(self) -> str:
        return winner(self.record_a, self.record_b)

    def report(self) -> list[str]:
        return report([self.record_a, self.record_b])

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        score_a, score_b = self.running_scores
        return {
            "rounds": self.rounds,
            "payoffs": self.matrix.to_dict(),
            "a": {**self.record_a.to_dict(), "running_score": score_a, "total": total(self.record_a)},
            "b": {**self.record_b.to_dict(), "running_score": score_b, "total": total(self.record_b)},
            "outcome": self.outcome.value,
            "winner": self.winner,
        }


def run_match(
    rounds: int,
    identifier_a: str,
    identifier_b: str,
    matrix: Optional[PayoffMatrix] = None,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> MatchResult:
    """Run a match and wrap the final records in a MatchResult.

    Takes the same arguments as initiate_match.
    """
    record_a, record_b, matrix = _play_match(rounds, identifier_a, identifier_b, matrix, rng, seed)
    return MatchResult(record_a=record_a, record_b=record_b, rounds=rounds, matrix=matrix)
