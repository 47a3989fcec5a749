"""
Deck - the read-only card sequence shared by every study mode.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from core.schemas import Card, FlashcardSet


class Deck:
    """
    Ordered, read-only sequence of cards for one set.
    """

    def __init__(self, cards: Iterable[Card] = (), name: str = "", set_id: str = ""):
        self._cards: tuple[Card, ...] = tuple(cards)
        self.name = name
        self.set_id = set_id

    @classmethod
    def from_set(cls, flashcard_set: FlashcardSet) -> "Deck":
        return cls(flashcard_set.cards, name=flashcard_set.name, set_id=flashcard_set.id)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __getitem__(self, index: int) -> Card:
        return self._cards[index]

    @property
    def is_empty(self) -> bool:
        return not self._cards

    def wrap(self, index: int) -> int:
        """
        Map any integer onto a valid position (circular deck).

        Raises:
            IndexError: The deck is empty
        """
        if self.is_empty:
            raise IndexError("Cannot index into an empty deck")
        return index % len(self._cards)

    def __repr__(self):
        return f"<Deck({self.set_id!r}, {len(self)} cards)>"
