"""Payoff parameters for the iterated Prisoner's Dilemma.

This module is the SINGLE SOURCE OF TRUTH for the default payoff constants.
They can be overridden per match (see prisoners.config and
prisoners.models.matrices.PayoffParameters) but every override must keep the
same ordering.

Ordering constraints:
    BACKSTABBER > PARTNER > DEFECTOR > SUCKER
    2 * PARTNER > BACKSTABBER + SUCKER

Usage:
    from prisoners.parameters import PARTNER_PAYOFF, BACKSTABBER_PAYOFF
"""

# =============================================================================
# PAYOFF CONSTANTS
# =============================================================================

SUCKER_PAYOFF = 0
"""Payoff for the cooperator when the other strategy defects (S).

Current: 0

Analysis:
    The worst single-round result. Strategies that keep cooperating
    against a defector collect this every round.

Related: BACKSTABBER_PAYOFF
"""

DEFECTOR_PAYOFF = 1
"""Payoff to both strategies when both defect (P).

Current: 1

Analysis:
    Better than being the sucker, worse than mutual cooperation.
    This is the Nash equilibrium payoff of the one-shot game.

Related: PARTNER_PAYOFF
"""

PARTNER_PAYOFF = 3
"""Payoff to both strategies when both cooperate (R).

Current: 3

Analysis:
    Also the threshold for belief inference: a strategy that received
    less than PARTNER_PAYOFF in a round concludes its opponent defected.
    Under the ordering constraints this is always correct:
    - CC: 3 (not < 3) -> opponent cooperated
    - DC: 5 (not < 3) -> opponent cooperated
    - CD: 0 (< 3) -> opponent defected
    - DD: 1 (< 3) -> opponent defected

Related: DEFECTOR_PAYOFF, BACKSTABBER_PAYOFF
"""

BACKSTABBER_PAYOFF = 5
"""Payoff for the defector when the other strategy cooperates (T).

Current: 5

Analysis:
    Temptation to defect. Must stay below 2 * PARTNER_PAYOFF - SUCKER_PAYOFF
    so alternating exploitation never beats sustained cooperation:
    - 2 * 3 = 6 > 5 + 0 = 5

Related: SUCKER_PAYOFF, PARTNER_PAYOFF
"""
