"""Move definitions for the iterated Prisoner's Dilemma."""

from enum import Enum


class Move(str, Enum):
    """A single move: cooperate or defect.

    Inherits from str for proper JSON serialization.
    """

    COOPERATE = "coop"
    DEFECT = "defect"

    @property
    def symbol(self) -> str:
        """Single-letter matrix notation (C or D)."""
        return "C" if self is Move.COOPERATE else "D"
