"""Protocol for Deck repository in learning context."""

from typing import Protocol

from flashdeck.domain.common.value_objects.ids import DeckId, UserId
from flashdeck.domain.learning.entities.deck import Deck


class DeckRepositoryProtocol(Protocol):
    """Protocol for Deck repository operations."""

    def find_by_id(self, deck_id: DeckId, user_id: UserId) -> Deck | None:
        """
        Find a deck by ID with user ownership check.

        Args:
            deck_id: The deck ID
            user_id: The user ID for ownership verification

        Returns:
            Deck entity if found and owned by user, None otherwise
        """
        ...

    def find_page_with_counts(
        self, user_id: UserId, offset: int, limit: int
    ) -> list[tuple[Deck, int]]:
        """
        Get a page of the user's decks, newest first, with flashcard counts.

        Returns:
            List of (deck, flashcard_count) tuples
        """
        ...

    def count_by_user(self, user_id: UserId) -> int: ...

    def delete(self, deck_id: DeckId, user_id: UserId) -> bool:
        """
        Delete a deck together with its flashcards and generations.

        Returns:
            True if deleted, False if not found or owned by someone else
        """
        ...

    def save(self, deck: Deck) -> Deck:
        """
        Save a deck entity (create or update).

        Returns:
            Saved deck entity with database-generated values
        """
        ...
