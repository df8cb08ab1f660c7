"""Protocol for Flashcard repository in learning context."""

from typing import Protocol

from flashdeck.domain.common.value_objects.ids import DeckId, FlashcardId, UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations in learning context."""

    def find_by_id(self, flashcard_id: FlashcardId, user_id: UserId) -> Flashcard | None:
        """
        Find a flashcard by ID, checking ownership through its deck.

        Args:
            flashcard_id: The flashcard ID
            user_id: The user ID for ownership verification

        Returns:
            Flashcard entity if found and owned by user, None otherwise
        """
        ...

    def find_by_deck(self, deck_id: DeckId) -> list[Flashcard]:
        """
        Get all flashcards for a deck.

        Returns:
            List of flashcard entities ordered by created_at DESC
        """
        ...

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Save a flashcard entity (create or update).

        Returns:
            Saved flashcard entity with database-generated values
        """
        ...

    def save_all(self, flashcards: list[Flashcard]) -> list[Flashcard]:
        """
        Insert several new flashcards in one transaction.

        Returns:
            The saved flashcards, in input order
        """
        ...

    def delete(self, flashcard_id: FlashcardId, user_id: UserId) -> bool:
        """
        Delete a flashcard.

        Returns:
            True if deleted, False if not found
        """
        ...
