"""Configuration for the Prisoner's Dilemma engine.

Payoff constants and the random seed can be overridden via environment
variables. Configuration is read once when a match starts; a running match
keeps the matrix it started with.

Environment variables:
    PRISONERS_PAYOFF_SUCKER: Cooperate vs defect payoff (default: 0)
    PRISONERS_PAYOFF_DEFECTOR: Mutual defection payoff (default: 1)
    PRISONERS_PAYOFF_PARTNER: Mutual cooperation payoff (default: 3)
    PRISONERS_PAYOFF_BACKSTABBER: Defect vs cooperate payoff (default: 5)
    PRISONERS_SEED: Seed for the random strategy (default: unset)
"""

import os

from prisoners import parameters
from prisoners.models.matrices import PayoffMatrix, PayoffParameters, build_payoff_matrix

PAYOFF_ENV_VARS = {
    "sucker": "PRISONERS_PAYOFF_SUCKER",
    "defector": "PRISONERS_PAYOFF_DEFECTOR",
    "partner": "PRISONERS_PAYOFF_PARTNER",
    "backstabber": "PRISONERS_PAYOFF_BACKSTABBER",
}

DEFAULT_PAYOFFS = {
    "sucker": parameters.SUCKER_PAYOFF,
    "defector": parameters.DEFECTOR_PAYOFF,
    "partner": parameters.PARTNER_PAYOFF,
    "backstabber": parameters.BACKSTABBER_PAYOFF,
}


def _get_int(var: str, default: int) -> int:
    """Read an integer environment variable."""
    value = os.environ.get(var)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {value!r}") from None


def get_payoff_parameters() -> PayoffParameters:
    """Get configured payoff parameters from environment."""
    return PayoffParameters(
        **{name: _get_int(var, DEFAULT_PAYOFFS[name]) for name, var in PAYOFF_ENV_VARS.items()}
    )


def get_default_matrix() -> PayoffMatrix:
    """Build the payoff matrix from environment configuration.

    Raises:
        InvalidPayoffConfigurationError: If the configured payoffs break the ordering
    """
    return build_payoff_matrix(get_payoff_parameters())


def get_seed() -> int | None:
    """Get configured random seed from environment."""
    value = os.environ.get("PRISONERS_SEED")
    if value is None or value.strip() == "":
        return None
    return _get_int("PRISONERS_SEED", 0)
