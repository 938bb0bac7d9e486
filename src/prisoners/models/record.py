"""Strategy record for a single side of a match.

A record is an append-only log of one strategy's play: the payoffs it
received, the moves it made, and the moves it believes its opponent made.
Records are immutable; every update returns a new record sharing nothing
mutable with the old one.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from prisoners.models.moves import Move


@dataclass(frozen=True)
class StrategyRecord:
    """Immutable history of one strategy within a match.

    Attributes:
        identity: Registered strategy identifier (e.g. "tit-for-tat")
        points: Payoff received each completed round
        moves: This strategy's own moves
        beliefs: Opponent moves inferred from this strategy's own payoffs

    Between rounds all three sequences have the same length. Inside a round
    `moves` leads by one after the move step and before the payoff step.
    """

    identity: str
    points: tuple[int, ...] = field(default=())
    moves: tuple[Move, ...] = field(default=())
    beliefs: tuple[Move, ...] = field(default=())

    def __post_init__(self) -> None:
        """Validate sequence lengths."""
        if len(self.points) != len(self.beliefs):
            raise ValueError(
                f"points and beliefs must have equal length, "
                f"got {len(self.points)} and {len(self.beliefs)}"
            )
        if len(self.moves) - len(self.points) not in (0, 1):
            raise ValueError(
                f"moves may lead points by at most one round, "
                f"got {len(self.moves)} moves for {len(self.points)} payoffs"
            )

    @classmethod
    def empty(cls, identity: str) -> StrategyRecord:
        """Create the initial record for a match."""
        return cls(identity=identity)

    @property
    def title(self) -> str:
        """Display name, e.g. "Tit For Tat"."""
        return self.identity.replace("-", " ").title()

    @property
    def rounds_played(self) -> int:
        """Number of completed (paid) rounds."""
        return len(self.points)

    @property
    def awaiting_payoff(self) -> bool:
        """True between the move step and the payoff step of a round."""
        return len(self.moves) > len(self.points)

    def with_move(self, move: Move) -> StrategyRecord:
        """Return a new record with `move` appended to moves."""
        if self.awaiting_payoff:
            raise ValueError(f"{self.identity} already moved this round")
        return replace(self, moves=self.moves + (Move(move),))

    def with_payoff(self, payoff: int, belief: Move) -> StrategyRecord:
        """Return a new record with a round's payoff and inferred opponent move."""
        if not self.awaiting_payoff:
            raise ValueError(f"{self.identity} cannot be paid before moving")
        return replace(
            self,
            points=self.points + (payoff,),
            beliefs=self.beliefs + (Move(belief),),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "identity": self.identity,
            "points": list(self.points),
            "moves": [m.value for m in self.moves],
            "beliefs": [b.value for b in self.beliefs],
        }
