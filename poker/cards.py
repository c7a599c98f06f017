"""Card, Deck, Suit, and Rank definitions for poker."""

from dataclasses import dataclass
from enum import IntEnum
from random import Random
from typing import Iterator


class EmptyDeckError(ValueError):
    """Raised when drawing from a deck with no cards left."""


class Suit(IntEnum):
    """Card suits."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    def __str__(self) -> str:
        symbols = {0: "♣", 1: "♦", 2: "♥", 3: "♠"}
        return symbols[self.value]


class Rank(IntEnum):
    """Card ranks (2-14, where 14 is Ace)."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]

    @property
    def face_name(self) -> str:
        """Long name for display: 'Jack', 'Queen', 'King', 'Ace' or the numeral."""
        if self.value <= 10:
            return str(self.value)
        return self.name.title()


_RANK_CHARS = {
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "T": Rank.TEN,
    "10": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}

_SUIT_CHARS = {
    "c": Suit.CLUBS,
    "d": Suit.DIAMONDS,
    "h": Suit.HEARTS,
    "s": Suit.SPADES,
    "♣": Suit.CLUBS,
    "♦": Suit.DIAMONDS,
    "♥": Suit.HEARTS,
    "♠": Suit.SPADES,
}


@dataclass(frozen=True, slots=True)
class Card:
    """A single playing card.

    Equality and hashing are structural on (rank, suit). Plain ints are
    coerced to Rank/Suit so ``Card(14, 3)`` is the ace of spades.
    """

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        object.__setattr__(self, "rank", Rank(self.rank))
        object.__setattr__(self, "suit", Suit(self.suit))

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def points(self) -> int:
        """Scoring weight: face value capped at 10 (Ace counts 10).

        Only used for point counting on screen, never for hand ranking.
        """
        return min(int(self.rank), 10)

    @property
    def name(self) -> str:
        """Human readable name such as 'Queen of Hearts'."""
        return f"{self.rank.face_name} of {self.suit.name.title()}"

    def to_index(self) -> int:
        """Convert to 0-51 index for encoding.

        Index = suit * 13 + (rank - 2)
        """
        return self.suit * 13 + (self.rank - 2)

    @classmethod
    def from_index(cls, index: int) -> "Card":
        """Create card from 0-51 index."""
        if not 0 <= index < 52:
            raise ValueError(f"Card index out of range: {index}")
        suit = Suit(index // 13)
        rank = Rank((index % 13) + 2)
        return cls(rank=rank, suit=suit)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Kh', '2c', 'Td', '10d' or 'Q♥'."""
        s = s.strip()
        if len(s) not in (2, 3):
            raise ValueError(f"Invalid card string: {s}")
        rank_part = s[:-1].upper()
        suit_char = s[-1].lower()
        if rank_part not in _RANK_CHARS:
            raise ValueError(f"Invalid rank: {rank_part}")
        if suit_char not in _SUIT_CHARS:
            raise ValueError(f"Invalid suit: {suit_char}")
        return cls(rank=_RANK_CHARS[rank_part], suit=_SUIT_CHARS[suit_char])


def parse_cards(text: str) -> list[Card]:
    """Parse a whitespace or comma separated list of card strings."""
    return [Card.from_string(token) for token in text.replace(",", " ").split()]


class Deck:
    """A standard 52-card deck.

    Cards are built suit by suit (every rank of clubs, then diamonds, ...).
    The top of the deck is the front of the list.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = Random(seed)
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Reset deck to full 52 cards."""
        self._cards = [Card.from_index(i) for i in range(52)]

    def shuffle(self) -> None:
        """Shuffle the remaining cards."""
        self._rng.shuffle(self._cards)

    def draw(self) -> Card:
        """Remove and return the top card."""
        if not self._cards:
            raise EmptyDeckError("No cards left in the deck")
        return self._cards.pop(0)

    def deal(self, n: int = 1) -> list[Card]:
        """Deal n cards from the top of the deck."""
        if n > len(self._cards):
            raise EmptyDeckError(f"Cannot deal {n} cards, only {len(self._cards)} remaining")
        dealt = self._cards[:n]
        self._cards = self._cards[n:]
        return dealt

    def return_card(self, card: Card) -> None:
        """Put a previously drawn card back at the bottom of the deck."""
        if card in self._cards:
            raise ValueError(f"{card!r} is already in the deck")
        self._cards.append(card)

    def remaining(self) -> int:
        """Number of cards remaining in deck."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self._cards)})"
