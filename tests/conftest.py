"""Shared pytest fixtures for the draw poker tests."""

import random

import pytest

from draw_poker import Card, GameSession, generate_deck


@pytest.fixture
def rng():
    """Provide a reproducible random generator."""
    return random.Random(42)


@pytest.fixture
def deck(rng):
    """A fresh, ordered 52-card deck with a seeded shuffle."""
    return generate_deck(rng)


@pytest.fixture
def session(rng):
    """A new session in the idle phase."""
    return GameSession(rng=rng)


@pytest.fixture
def make_hand():
    """Build a list of Cards from card codes."""

    def _make(codes):
        return [Card(code) for code in codes]

    return _make
