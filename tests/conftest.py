"""Shared pytest fixtures for all tests."""

import random

import pytest

PAYOFF_ENV_VARS = (
    "PRISONERS_PAYOFF_SUCKER",
    "PRISONERS_PAYOFF_DEFECTOR",
    "PRISONERS_PAYOFF_PARTNER",
    "PRISONERS_PAYOFF_BACKSTABBER",
    "PRISONERS_SEED",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host environment payoff overrides out of every test."""
    for var in PAYOFF_ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def default_matrix():
    """Provide the default 0/1/3/5 payoff matrix."""
    from prisoners.models.matrices import build_payoff_matrix
    return build_payoff_matrix()


@pytest.fixture
def seeded_rng():
    """Provide a deterministic random source."""
    return random.Random(42)
