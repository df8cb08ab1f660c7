"""Protocol for Generation repository in learning context."""

from typing import Protocol

from flashdeck.domain.common.value_objects.ids import DeckId, GenerationId, UserId
from flashdeck.domain.learning.entities.generation import Generation


class GenerationRepositoryProtocol(Protocol):
    """Protocol for Generation repository operations."""

    def find_by_id(
        self, generation_id: GenerationId, user_id: UserId, deck_id: DeckId
    ) -> Generation | None:
        """
        Find a generation owned by the user and produced for the deck.

        Returns:
            Generation entity if found, None otherwise
        """
        ...

    def save(self, generation: Generation) -> Generation:
        """
        Save a generation entity (create or update).

        Returns:
            Saved generation entity with database-generated values
        """
        ...
