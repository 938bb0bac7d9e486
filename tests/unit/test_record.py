"""Unit tests for prisoners.models.record and prisoners.models.moves.

Tests cover:
- Move: values and matrix symbols
- StrategyRecord: empty construction, length invariants, functional updates
- Serialization via to_dict
"""

import dataclasses

import pytest

from prisoners.models.moves import Move
from prisoners.models.record import StrategyRecord


class TestMove:
    """Tests for Move enum."""

    def test_values(self):
        assert Move.COOPERATE.value == "coop"
        assert Move.DEFECT.value == "defect"
        assert len(list(Move)) == 2

    def test_symbols(self):
        assert Move.COOPERATE.symbol == "C"
        assert Move.DEFECT.symbol == "D"

    def test_is_string(self):
        """Move inherits from str so it serializes cleanly."""
        assert Move("coop") is Move.COOPERATE
        assert Move.DEFECT == "defect"


class TestStrategyRecord:
    """Tests for StrategyRecord."""

    def test_empty_record(self):
        record = StrategyRecord.empty("grudger")
        assert record.identity == "grudger"
        assert record.points == ()
        assert record.moves == ()
        assert record.beliefs == ()
        assert record.rounds_played == 0
        assert not record.awaiting_payoff

    def test_title(self):
        assert StrategyRecord.empty("tit-for-tat").title == "Tit For Tat"
        assert StrategyRecord.empty("sucker").title == "Sucker"

    def test_is_frozen(self):
        record = StrategyRecord.empty("cheat")
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.identity = "sucker"

    def test_with_move_returns_new_record(self):
        """Appending a move leaves the original record untouched."""
        original = StrategyRecord.empty("sucker")
        moved = original.with_move(Move.COOPERATE)

        assert original.moves == ()
        assert moved.moves == (Move.COOPERATE,)
        assert moved.points == ()
        assert moved.beliefs == ()
        assert moved.awaiting_payoff

    def test_with_payoff_completes_round(self):
        record = StrategyRecord.empty("sucker").with_move(Move.COOPERATE)
        paid = record.with_payoff(3, Move.COOPERATE)

        assert paid.points == (3,)
        assert paid.beliefs == (Move.COOPERATE,)
        assert paid.rounds_played == 1
        assert len(paid.points) == len(paid.moves) == len(paid.beliefs)
        # Earlier value unchanged
        assert record.points == ()

    def test_cannot_move_twice_in_a_round(self):
        record = StrategyRecord.empty("cheat").with_move(Move.DEFECT)
        with pytest.raises(ValueError, match="already moved"):
            record.with_move(Move.DEFECT)

    def test_cannot_be_paid_before_moving(self):
        with pytest.raises(ValueError, match="before moving"):
            StrategyRecord.empty("cheat").with_payoff(1, Move.DEFECT)

    def test_mismatched_lengths_rejected(self):
        with pytest.raises(ValueError, match="equal length"):
            StrategyRecord(identity="cheat", points=(1,), moves=(Move.DEFECT,), beliefs=())

    def test_moves_cannot_lead_by_two(self):
        with pytest.raises(ValueError, match="at most one"):
            StrategyRecord(identity="cheat", moves=(Move.DEFECT, Move.DEFECT))

    def test_to_dict(self):
        record = (
            StrategyRecord.empty("cheat")
            .with_move(Move.DEFECT)
            .with_payoff(5, Move.COOPERATE)
        )
        assert record.to_dict() == {
            "identity": "cheat",
            "points": [5],
            "moves": ["defect"],
            "beliefs": ["coop"],
        }
