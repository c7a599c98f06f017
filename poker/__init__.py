"""Heads-up Texas Hold'em dealing and showdown engine."""

from poker.cards import Card, Deck, EmptyDeckError, Rank, Suit, parse_cards
from poker.game import HeadsUpRound, RoundResult
from poker.hand import EmptyContainerError, Hand, IndexOutOfRangeError
from poker.hand_evaluator import (
    EvaluatedHand,
    HandCategory,
    HandEvaluator,
    InvalidHandSizeError,
    Verdict,
    compare_hands,
    evaluate_hand,
)

__all__ = [
    "Card",
    "Deck",
    "EmptyDeckError",
    "Rank",
    "Suit",
    "parse_cards",
    "Hand",
    "EmptyContainerError",
    "IndexOutOfRangeError",
    "EvaluatedHand",
    "HandCategory",
    "HandEvaluator",
    "InvalidHandSizeError",
    "Verdict",
    "compare_hands",
    "evaluate_hand",
    "HeadsUpRound",
    "RoundResult",
]
