"""Payoff resolution for a single Prisoner's Dilemma round.

Classifies a simultaneous move pair, scores it against a PayoffMatrix, and
infers what each side believes its opponent played. Beliefs are derived
from each side's own payoff, never copied from the opponent's move:

    belief = DEFECT if my_payoff < matrix.partner else COOPERATE

This inference is exact only because build_payoff_matrix rejects any matrix
that breaks backstabber > partner > defector > sucker.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from prisoners.models.matrices import PayoffMatrix
from prisoners.models.moves import Move
from prisoners.models.record import StrategyRecord


class Outcome(Enum):
    """Outcome category of a round, in classification order."""

    MUTUAL_COOPERATION = "mutual_cooperation"
    MUTUAL_DEFECTION = "mutual_defection"
    BETRAYAL_BY_A = "betrayal_by_a"  # A defects, B cooperates
    BETRAYAL_BY_B = "betrayal_by_b"  # A cooperates, B defects


@dataclass(frozen=True)
class RoundPayoffs:
    """Scores and inferred beliefs for one round.

    Attributes:
        outcome: The outcome category
        payoff_a: Payoff received by side A
        payoff_b: Payoff received by side B
        belief_a: What A infers B played
        belief_b: What B infers A played
    """

    outcome: Outcome
    payoff_a: int
    payoff_b: int
    belief_a: Move
    belief_b: Move


# =============================================================================
# Predicates
# =============================================================================


def is_mutual_cooperation(*moves: Move) -> bool:
    """Mutual cooperation is when every strategy cooperated."""
    return all(m == Move.COOPERATE for m in moves)


def is_mutual_defection(*moves: Move) -> bool:
    """Mutual defection is when every strategy defected."""
    return all(m == Move.DEFECT for m in moves)


def is_betrayal(x: Move, y: Move) -> bool:
    """Betrayal is when the first strategy defected and the second cooperated."""
    return x == Move.DEFECT and y == Move.COOPERATE


def classify_outcome(move_a: Move, move_b: Move) -> Outcome:
    """Classify a move pair. The four cases are exhaustive."""
    if is_mutual_cooperation(move_a, move_b):
        return Outcome.MUTUAL_COOPERATION
    if is_mutual_defection(move_a, move_b):
        return Outcome.MUTUAL_DEFECTION
    if is_betrayal(move_a, move_b):
        return Outcome.BETRAYAL_BY_A
    return Outcome.BETRAYAL_BY_B


# =============================================================================
# Payoff Functions
# =============================================================================


def infer_opponent_move(payoff: int, matrix: PayoffMatrix) -> Move:
    """Infer the opponent's move from one's own payoff.

    If my payoff is less than the partner payoff my opponent must have
    defected.
    """
    if payoff < matrix.partner:
        return Move.DEFECT
    return Move.COOPERATE


def score_outcome(outcome: Outcome, matrix: PayoffMatrix) -> tuple[int, int]:
    """Return (payoff_a, payoff_b) for an outcome."""
    if outcome == Outcome.MUTUAL_COOPERATION:
        return matrix.partner, matrix.partner
    if outcome == Outcome.MUTUAL_DEFECTION:
        return matrix.defector, matrix.defector
    if outcome == Outcome.BETRAYAL_BY_A:
        return matrix.backstabber, matrix.sucker
    return matrix.sucker, matrix.backstabber


def resolve_payoffs(move_a: Move, move_b: Move, matrix: PayoffMatrix) -> RoundPayoffs:
    """Classify and score one round.

    Args:
        move_a: Side A's move
        move_b: Side B's move
        matrix: Validated payoff matrix

    Returns:
        RoundPayoffs with both scores and both inferred beliefs
    """
    outcome = classify_outcome(move_a, move_b)
    payoff_a, payoff_b = score_outcome(outcome, matrix)
    return RoundPayoffs(
        outcome=outcome,
        payoff_a=payoff_a,
        payoff_b=payoff_b,
        belief_a=infer_opponent_move(payoff_a, matrix),
        belief_b=infer_opponent_move(payoff_b, matrix),
    )


def pay(record: StrategyRecord, payoff: int, matrix: PayoffMatrix) -> StrategyRecord:
    """Pay a record for a round.

    The mechanics of payment include both adding the points for the round
    and recording the opponent's inferred move.
    """
    return record.with_payoff(payoff, infer_opponent_move(payoff, matrix))
