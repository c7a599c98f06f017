"""Heads-up Texas Hold'em round: deal two hands and a board, then show down."""

import logging
from dataclasses import dataclass

from poker.cards import Card, Deck
from poker.hand import Hand
from poker.hand_evaluator import (
    MAX_CARDS,
    MIN_CARDS,
    EvaluatedHand,
    HandEvaluator,
    Verdict,
    compare_hands,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoundResult:
    """Result of a completed round."""

    hole_cards: tuple[tuple[Card, ...], tuple[Card, ...]]
    community_cards: tuple[Card, ...]
    evaluations: tuple[EvaluatedHand, EvaluatedHand] | None  # None if someone folded
    verdict: Verdict
    folded_by: int | None = None  # Player number (1 or 2) who folded

    @property
    def winner(self) -> int | None:
        """Winning player number, or None for a tie."""
        if self.verdict is Verdict.FIRST_WINS:
            return 1
        if self.verdict is Verdict.SECOND_WINS:
            return 2
        return None

    @property
    def went_to_showdown(self) -> bool:
        return self.folded_by is None


class HeadsUpRound:
    """Orchestrate a single two-player round with no betting."""

    def __init__(
        self,
        deck: Deck | None = None,
        seed: int | None = None,
        hole_cards: int = 2,
        community_cards: int = 5,
    ) -> None:
        if hole_cards < 1 or community_cards < 1:
            raise ValueError("Need at least 1 hole card and 1 community card")
        if not MIN_CARDS <= hole_cards + community_cards <= MAX_CARDS:
            raise ValueError(
                f"Hole plus community cards must be {MIN_CARDS}-{MAX_CARDS}, "
                f"got {hole_cards + community_cards}"
            )

        if deck is None:
            deck = Deck(seed)
            deck.shuffle()
        self.deck = deck
        self.num_hole_cards = hole_cards
        self.num_community_cards = community_cards
        self.hands = (Hand(), Hand())
        self.community_cards: list[Card] = []

    def deal_hole_cards(self) -> None:
        """Deal hole cards one at a time, alternating between players."""
        for _ in range(self.num_hole_cards):
            for hand in self.hands:
                hand.push(self.deck.draw())
        logger.debug(
            "Dealt hole cards: P1=%s P2=%s",
            " ".join(map(str, self.hands[0])),
            " ".join(map(str, self.hands[1])),
        )

    def deal_community(self) -> None:
        """Deal the board."""
        self.community_cards = self.deck.deal(self.num_community_cards)
        logger.debug("Dealt board: %s", " ".join(map(str, self.community_cards)))

    def showdown(self) -> RoundResult:
        """Evaluate both hands against the board and pick the winner."""
        if any(len(hand) < self.num_hole_cards for hand in self.hands):
            raise RuntimeError("Hole cards have not been dealt")
        if len(self.community_cards) < self.num_community_cards:
            raise RuntimeError("Community cards have not been dealt")

        first, second = (
            HandEvaluator.evaluate_holdem(hand.to_list(), self.community_cards)
            for hand in self.hands
        )
        verdict = compare_hands(first, second)
        logger.info("Showdown: P1 %s vs P2 %s -> %s", first, second, verdict.name)

        return RoundResult(
            hole_cards=self._hole_snapshot(),
            community_cards=tuple(self.community_cards),
            evaluations=(first, second),
            verdict=verdict,
        )

    def play(self) -> RoundResult:
        """Deal everything and show down."""
        self.deal_hole_cards()
        self.deal_community()
        return self.showdown()

    def fold(self, player: int) -> RoundResult:
        """End the round with ``player`` (1 or 2) folding before the board."""
        if player not in (1, 2):
            raise ValueError(f"Player must be 1 or 2, got {player}")
        verdict = Verdict.SECOND_WINS if player == 1 else Verdict.FIRST_WINS
        logger.info("Player %d folded", player)

        return RoundResult(
            hole_cards=self._hole_snapshot(),
            community_cards=tuple(self.community_cards),
            evaluations=None,
            verdict=verdict,
            folded_by=player,
        )

    def _hole_snapshot(self) -> tuple[tuple[Card, ...], tuple[Card, ...]]:
        return tuple(self.hands[0].to_list()), tuple(self.hands[1].to_list())
