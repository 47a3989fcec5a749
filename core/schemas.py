"""
Pydantic models for flashcard sets.

These models define the structure of MongoDB documents returned by the
set repository and handed to the study engine.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CardField(str, Enum):
    """Which side of a card a value comes from."""
    TERM = "term"
    DEFINITION = "definition"


class Card(BaseModel):
    """
    A single term/definition pair.

    Cards are immutable; identity within a deck is positional, so two cards
    with identical text are still distinct entries.
    """
    model_config = ConfigDict(frozen=True)

    term: str = ""
    definition: str = ""

    def value(self, field: CardField) -> str:
        """Return the text stored under `field`."""
        if field == CardField.TERM:
            return self.term
        return self.definition


class FlashcardSet(BaseModel):
    """A named, ordered collection of cards."""
    id: str
    name: str = ""
    cards: list[Card] = Field(default_factory=list)
