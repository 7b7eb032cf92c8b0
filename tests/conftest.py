"""
Pytest configuration and shared fixtures for PokerRank tests.
"""

import random

import pytest
from fastapi.testclient import TestClient

from pokerrank.core.card import Card, Deck, Rank, Suit
from pokerrank.core.game import HeadsUpGame
from pokerrank.server import routes
from pokerrank.server.app import create_app


@pytest.fixture
def rng():
    """A seeded random source for reproducible deals."""
    return random.Random(1234)


@pytest.fixture
def deck(rng):
    """Create a fresh shuffled deck."""
    return Deck(shuffle=True, rng=rng)


@pytest.fixture
def unshuffled_deck():
    """Create a fresh unshuffled deck."""
    return Deck(shuffle=False)


@pytest.fixture
def heads_up_game(rng):
    """Create a heads-up game with a reproducible shuffle."""
    return HeadsUpGame(rng=rng)


@pytest.fixture
def client():
    """HTTP client against a fresh app with no game in progress."""
    routes._game = None
    yield TestClient(create_app())
    routes._game = None


@pytest.fixture
def sample_hand():
    """Create a sample 5-card hand (pair of aces)."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.ACE, Suit.HEARTS),
        Card(Rank.KING, Suit.DIAMONDS),
        Card(Rank.QUEEN, Suit.CLUBS),
        Card(Rank.JACK, Suit.SPADES),
    ]


@pytest.fixture
def royal_flush():
    """Create a royal flush hand."""
    return [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.KING, Suit.SPADES),
        Card(Rank.QUEEN, Suit.SPADES),
        Card(Rank.JACK, Suit.SPADES),
        Card(Rank.TEN, Suit.SPADES),
    ]


@pytest.fixture
def straight_flush():
    """Create a straight flush (9-high)."""
    return [
        Card(Rank.NINE, Suit.HEARTS),
        Card(Rank.EIGHT, Suit.HEARTS),
        Card(Rank.SEVEN, Suit.HEARTS),
        Card(Rank.SIX, Suit.HEARTS),
        Card(Rank.FIVE, Suit.HEARTS),
    ]


@pytest.fixture
def wheel_straight():
    """Create a wheel straight (A-2-3-4-5)."""
    return [
        Card(Rank.ACE, Suit.DIAMONDS),
        Card(Rank.TWO, Suit.CLUBS),
        Card(Rank.THREE, Suit.HEARTS),
        Card(Rank.FOUR, Suit.SPADES),
        Card(Rank.FIVE, Suit.DIAMONDS),
    ]
