"""Hand evaluation for Texas Hold'em poker.

``HandEvaluator.evaluate`` classifies 5 to 7 cards into the best hand
category they contain and builds a tiebreak key for comparing two hands
of the same category. Categories are checked strongest first and the
first match wins, so a straight flush is never reported as a flush.
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Sequence

from poker.cards import Card, Rank

MIN_CARDS = 5
MAX_CARDS = 7
HAND_SIZE = 5


class InvalidHandSizeError(ValueError):
    """Raised when the evaluator gets fewer than 5 or more than 7 cards."""


class HandCategory(IntEnum):
    """Poker hand categories from lowest to highest."""

    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    def __str__(self) -> str:
        names = {
            1: "High Card",
            2: "One Pair",
            3: "Two Pair",
            4: "Three of a Kind",
            5: "Straight",
            6: "Flush",
            7: "Full House",
            8: "Four of a Kind",
            9: "Straight Flush",
            10: "Royal Flush",
        }
        return names[self.value]


class Verdict(Enum):
    """Outcome of comparing two evaluated hands."""

    FIRST_WINS = auto()
    SECOND_WINS = auto()
    TIE = auto()


@dataclass(frozen=True, slots=True)
class EvaluatedHand:
    """Result of evaluating a poker hand."""

    category: HandCategory
    tiebreak: tuple[int, ...]  # Ranks for comparison (most significant first)

    def __str__(self) -> str:
        if not self.tiebreak:
            return str(self.category)
        ranks = " ".join(str(Rank(r)) for r in self.tiebreak)
        return f"{self.category} ({ranks})"


def compare_hands(first: EvaluatedHand, second: EvaluatedHand) -> Verdict:
    """Decide which of two evaluated hands wins.

    Categories are compared first. Equal categories compare tiebreaks
    position by position over their common length; running out of
    either sequence with everything equal is a tie.
    """
    if first.category != second.category:
        return Verdict.FIRST_WINS if first.category > second.category else Verdict.SECOND_WINS

    for a, b in zip(first.tiebreak, second.tiebreak):
        if a > b:
            return Verdict.FIRST_WINS
        if b > a:
            return Verdict.SECOND_WINS
    return Verdict.TIE


class HandEvaluator:
    """Evaluate poker hands."""

    @staticmethod
    def evaluate(cards: Sequence[Card]) -> EvaluatedHand:
        """Evaluate the best 5-card hand contained in 5 to 7 cards."""
        if not MIN_CARDS <= len(cards) <= MAX_CARDS:
            raise InvalidHandSizeError(
                f"Expected {MIN_CARDS}-{MAX_CARDS} cards, got {len(cards)}"
            )

        ordered = sorted(cards, key=lambda c: c.rank, reverse=True)
        ranks = [int(c.rank) for c in ordered]
        groups = HandEvaluator._group_ranks(ranks)
        flush_ranks = HandEvaluator._flush_ranks(ordered)

        # Straight flush (royal flush is the ace-high one)
        if flush_ranks:
            straight_flush_high = HandEvaluator._straight_high(flush_ranks)
            if straight_flush_high == Rank.ACE:
                return EvaluatedHand(HandCategory.ROYAL_FLUSH, ())
            if straight_flush_high:
                return EvaluatedHand(HandCategory.STRAIGHT_FLUSH, (straight_flush_high,))

        # Four of a kind
        quads = [r for r, c in groups if c == 4]
        if quads:
            quad_rank = quads[0]
            kickers = HandEvaluator._kickers(ranks, quad_rank)
            return EvaluatedHand(HandCategory.FOUR_OF_A_KIND, (quad_rank, *kickers[:1]))

        # Full house: highest triple plus the highest other group of two or more
        trips = [r for r, c in groups if c == 3]
        if trips:
            trips_rank = max(trips)
            pair_candidates = [r for r, c in groups if c >= 2 and r != trips_rank]
            if pair_candidates:
                return EvaluatedHand(
                    HandCategory.FULL_HOUSE, (trips_rank, max(pair_candidates))
                )

        # Flush
        if flush_ranks:
            return EvaluatedHand(HandCategory.FLUSH, tuple(flush_ranks[:HAND_SIZE]))

        # Straight
        straight_high = HandEvaluator._straight_high(ranks)
        if straight_high:
            return EvaluatedHand(HandCategory.STRAIGHT, (straight_high,))

        # Three of a kind
        if trips:
            trips_rank = max(trips)
            kickers = HandEvaluator._kickers(ranks, trips_rank)
            return EvaluatedHand(HandCategory.THREE_OF_A_KIND, (trips_rank, *kickers[:2]))

        # Two pair
        pairs = sorted((r for r, c in groups if c == 2), reverse=True)
        if len(pairs) >= 2:
            high_pair, low_pair = pairs[0], pairs[1]
            kickers = HandEvaluator._kickers(ranks, high_pair, low_pair)
            return EvaluatedHand(HandCategory.TWO_PAIR, (high_pair, low_pair, *kickers[:1]))

        # One pair
        if pairs:
            pair_rank = pairs[0]
            kickers = HandEvaluator._kickers(ranks, pair_rank)
            return EvaluatedHand(HandCategory.ONE_PAIR, (pair_rank, *kickers[:3]))

        # High card
        return EvaluatedHand(HandCategory.HIGH_CARD, tuple(ranks[:HAND_SIZE]))

    @staticmethod
    def evaluate_holdem(hole_cards: Sequence[Card], community: Sequence[Card]) -> EvaluatedHand:
        """Evaluate a player's best hand from hole cards + community cards."""
        return HandEvaluator.evaluate(list(hole_cards) + list(community))

    @staticmethod
    def _group_ranks(ranks: list[int]) -> list[tuple[int, int]]:
        """Group ranks into (rank, count), biggest group first, then highest rank."""
        counts = Counter(ranks)
        return sorted(counts.items(), key=lambda item: (item[1], item[0]), reverse=True)

    @staticmethod
    def _flush_ranks(ordered: list[Card]) -> list[int]:
        """Descending ranks of the suit holding five or more cards, else []."""
        suit_counts = Counter(c.suit for c in ordered)
        for suit, count in suit_counts.items():
            if count >= HAND_SIZE:
                return [int(c.rank) for c in ordered if c.suit == suit]
        return []

    @staticmethod
    def _straight_high(ranks: list[int]) -> int:
        """High card of the best straight in ``ranks``, or 0 if there is none."""
        unique_ranks = sorted(set(ranks), reverse=True)
        if Rank.ACE in unique_ranks:
            unique_ranks.append(1)  # Ace plays low in the wheel
        if len(unique_ranks) < HAND_SIZE:
            return 0

        for i in range(len(unique_ranks) - 4):
            window = unique_ranks[i : i + 5]
            if window[0] - window[4] == 4:
                return window[0]
        return 0

    @staticmethod
    def _kickers(ranks: list[int], *exclude: int) -> list[int]:
        """Ranks left after removing the defining ones, highest first."""
        return [r for r in ranks if r not in exclude]

    @staticmethod
    def compare_hands(hands: list[EvaluatedHand]) -> list[int]:
        """Return indices of the hands no other hand beats (handles ties)."""
        winners = []
        for i, hand in enumerate(hands):
            if not any(
                compare_hands(other, hand) is Verdict.FIRST_WINS
                for j, other in enumerate(hands)
                if j != i
            ):
                winners.append(i)
        return winners


def evaluate_hand(cards: Sequence[Card]) -> EvaluatedHand:
    """Module-level shortcut for ``HandEvaluator.evaluate``."""
    return HandEvaluator.evaluate(cards)
