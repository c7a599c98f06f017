"""Ordered container for a player's cards."""

from typing import Iterable, Iterator

from poker.cards import Card


class EmptyContainerError(IndexError):
    """Raised when reading or removing the top of an empty hand."""


class IndexOutOfRangeError(IndexError):
    """Raised when an insert/remove position is outside the hand."""


class Hand:
    """A stack-like hand of cards with positional insert and remove.

    Index 0 is the top of the hand: ``push`` puts a card there and
    ``pop`` takes it back off. ``to_list`` returns a top-first snapshot.
    """

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: list[Card] = []
        for card in cards:
            self.push(card)

    def push(self, card: Card) -> None:
        """Place a card on top of the hand."""
        self._cards.insert(0, card)

    def pop(self) -> Card:
        """Remove and return the top card."""
        if not self._cards:
            raise EmptyContainerError("Hand is empty")
        return self._cards.pop(0)

    def peek(self) -> Card:
        """Return the top card without removing it."""
        if not self._cards:
            raise EmptyContainerError("Hand is empty")
        return self._cards[0]

    def top(self) -> Card | None:
        """Return the top card, or None for an empty hand."""
        return self._cards[0] if self._cards else None

    def insert_at(self, index: int, card: Card) -> None:
        """Insert a card so that it ends up at ``index``.

        Valid positions are 0 (same as push) through len(hand) (bottom).
        """
        if index < 0:
            raise IndexOutOfRangeError(f"Index must be non-negative, got {index}")
        if index > len(self._cards):
            raise IndexOutOfRangeError(
                f"Index {index} exceeds hand size {len(self._cards)}"
            )
        self._cards.insert(index, card)

    def remove_at(self, index: int) -> Card:
        """Remove and return the card at ``index``."""
        if index < 0:
            raise IndexOutOfRangeError(f"Index must be non-negative, got {index}")
        if index == 0:
            return self.pop()
        if index >= len(self._cards):
            raise IndexOutOfRangeError(
                f"Index {index} exceeds hand size {len(self._cards)}"
            )
        return self._cards.pop(index)

    def clear(self) -> None:
        self._cards.clear()

    def to_list(self) -> list[Card]:
        """Snapshot of the cards, top first."""
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.to_list())

    def __repr__(self) -> str:
        return f"Hand({', '.join(str(c) for c in self._cards)})"
