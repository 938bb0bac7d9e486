"""Prisoner's Dilemma models.

This module exports the core data structures for the engine.
"""

from .matrices import (
    DEFAULT_MATRIX,
    InvalidPayoffConfigurationError,
    PayoffMatrix,
    PayoffParameters,
    build_payoff_matrix,
    validate_payoff_parameters,
)
from .moves import Move
from .record import StrategyRecord

__all__ = [
    # Enums
    "Move",
    # Records
    "StrategyRecord",
    # Payoff matrix
    "PayoffParameters",
    "PayoffMatrix",
    "DEFAULT_MATRIX",
    "build_payoff_matrix",
    "validate_payoff_parameters",
    # Errors
    "InvalidPayoffConfigurationError",
]
