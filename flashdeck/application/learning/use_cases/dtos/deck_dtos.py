"""DTOs for deck use cases."""

import math
from dataclasses import dataclass

from flashdeck.domain.learning.entities.deck import Deck


@dataclass
class DeckWithCount:
    """Deck together with the number of flashcards it holds."""

    deck: Deck
    flashcard_count: int


@dataclass
class DeckPage:
    """One page of a user's decks."""

    items: list[DeckWithCount]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.total else 0
