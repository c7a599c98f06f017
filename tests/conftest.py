"""Shared pytest fixtures for poker tests."""

import pytest

from poker.cards import Deck
from poker.hand import Hand
from tests.helpers.card_utils import make_cards_from_strings


@pytest.fixture
def seeded_deck():
    """Provide a reproducible shuffled deck."""
    deck = Deck(seed=42)
    deck.shuffle()
    return deck


@pytest.fixture
def royal_flush():
    """Spade royal flush in scrambled order."""
    return make_cards_from_strings(["Ks", "Ts", "As", "Qs", "Js"])


@pytest.fixture
def three_card_hand():
    """Hand with 3 pushed cards: top is 4h, bottom is 2c."""
    return Hand(make_cards_from_strings(["2c", "3d", "4h"]))


@pytest.fixture(params=[5, 6, 7])
def n_cards(request):
    """Parametrize over valid evaluator input sizes."""
    return request.param
