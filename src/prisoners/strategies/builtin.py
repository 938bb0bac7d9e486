"""Built-in strategies for the iterated Prisoner's Dilemma.

Every strategy is a plain function of its own history:

    strategy(my_moves, opp_beliefs, rng) -> Move

`opp_beliefs` holds the moves this strategy inferred its opponent made, one
per completed round. Strategies never see the opponent's actual moves.
`rng` is the match's injected random source; deterministic strategies
ignore it.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Callable

from prisoners.models.moves import Move

# Type alias for strategy functions
Strategy = Callable[[Sequence[Move], Sequence[Move], random.Random], Move]


def always_cooperate(
    my_moves: Sequence[Move],
    opp_beliefs: Sequence[Move],
    rng: random.Random,
) -> Move:
    """Sucker: always cooperate."""
    return Move.COOPERATE


def always_defect(
    my_moves: Sequence[Move],
    opp_beliefs: Sequence[Move],
    rng: random.Random,
) -> Move:
    """Cheat: always defect."""
    return Move.DEFECT


def tit_for_tat(
    my_moves: Sequence[Move],
    opp_beliefs: Sequence[Move],
    rng: random.Random,
) -> Move:
    """TitForTat: cooperate first, then mirror opponent's last move."""
    if not opp_beliefs:
        return Move.COOPERATE
    return opp_beliefs[-1]


def grudger(
    my_moves: Sequence[Move],
    opp_beliefs: Sequence[Move],
    rng: random.Random,
) -> Move:
    """Grudger: cooperate until opponent defects, then defect forever.

    The trigger is derived from the full belief history rather than stored,
    so the function stays pure: once a defection is in the log it stays there.
    """
    if Move.DEFECT in opp_beliefs:
        return Move.DEFECT
    return Move.COOPERATE


def random_strategy(
    my_moves: Sequence[Move],
    opp_beliefs: Sequence[Move],
    rng: random.Random,
) -> Move:
    """Random: 50/50 mix of cooperate and defect."""
    return rng.choice([Move.COOPERATE, Move.DEFECT])


def pavlov(
    my_moves: Sequence[Move],
    opp_beliefs: Sequence[Move],
    rng: random.Random,
) -> Move:
    """Pavlov (win-stay, lose-shift).

    - First round: cooperate
    - Cooperate if both sides made the same move last round (CC or DD)
    - Otherwise defect
    """
    if not my_moves or not opp_beliefs:
        return Move.COOPERATE
    if my_moves[-1] == opp_beliefs[-1]:
        return Move.COOPERATE
    return Move.DEFECT
