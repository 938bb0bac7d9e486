"""Payoff matrix definitions for the iterated Prisoner's Dilemma.

This module follows the constructor pattern: callers supply parameters only,
and `build_payoff_matrix` enforces the ordinal constraints before anything
is built. PayoffMatrix re-checks them on construction, so every matrix that
reaches the engine satisfies:

    backstabber > partner > defector > sucker
    2 * partner > backstabber + sucker
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, StrictInt

from prisoners import parameters


class InvalidPayoffConfigurationError(ValueError):
    """Payoff constants violate the Prisoner's Dilemma ordering."""


class PayoffParameters(BaseModel):
    """Parameters for constructing a payoff matrix.

    Frozen so a configuration cannot change once a match has started.
    Field names follow the payoff each side receives:
    - sucker: cooperate while the other defects (S)
    - defector: mutual defection (P)
    - partner: mutual cooperation (R)
    - backstabber: defect while the other cooperates (T)
    """

    model_config = ConfigDict(frozen=True)

    sucker: StrictInt = parameters.SUCKER_PAYOFF
    defector: StrictInt = parameters.DEFECTOR_PAYOFF
    partner: StrictInt = parameters.PARTNER_PAYOFF
    backstabber: StrictInt = parameters.BACKSTABBER_PAYOFF


@dataclass(frozen=True)
class PayoffMatrix:
    """Validated payoffs for a 2x2 Prisoner's Dilemma.

    Usually produced by build_payoff_matrix. Direct construction runs the
    same ordering checks, so no invalid matrix can reach the engine.
    """

    sucker: int
    defector: int
    partner: int
    backstabber: int

    def __post_init__(self):
        check_payoff_ordering(self.sucker, self.defector, self.partner, self.backstabber)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "sucker": self.sucker,
            "defector": self.defector,
            "partner": self.partner,
            "backstabber": self.backstabber,
        }


def check_payoff_ordering(sucker: int, defector: int, partner: int, backstabber: int) -> None:
    """Raise InvalidPayoffConfigurationError unless T > R > P > S and 2R > T + S."""
    t, r, p, s = backstabber, partner, defector, sucker
    if not (t > r > p > s):
        raise InvalidPayoffConfigurationError(
            f"Prisoner's Dilemma requires backstabber > partner > defector > sucker, "
            f"got backstabber={t}, partner={r}, defector={p}, sucker={s}"
        )
    if not 2 * r > t + s:
        raise InvalidPayoffConfigurationError(
            f"Mutual cooperation must beat alternating exploitation (2 * partner > backstabber + sucker), "
            f"got 2 * {r} <= {t} + {s}"
        )


def validate_payoff_parameters(params: PayoffParameters) -> None:
    """Validate T > R > P > S and 2R > T + S.

    Raises InvalidPayoffConfigurationError if either constraint is violated.
    Values are never clamped.
    """
    check_payoff_ordering(params.sucker, params.defector, params.partner, params.backstabber)


def build_payoff_matrix(params: PayoffParameters | None = None) -> PayoffMatrix:
    """Build a payoff matrix from parameters.

    This is the main entry point for matrix construction. Uses the defaults
    from prisoners.parameters when no parameters are given.
    """
    if params is None:
        params = PayoffParameters()
    validate_payoff_parameters(params)
    return PayoffMatrix(
        sucker=params.sucker,
        defector=params.defector,
        partner=params.partner,
        backstabber=params.backstabber,
    )


DEFAULT_MATRIX = build_payoff_matrix()
