"""Use case for listing the flashcards of a deck."""

from uuid import UUID

from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.domain.common.value_objects.ids import DeckId, UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.exceptions import DeckNotFoundError


class GetFlashcardsByDeckUseCase:
    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        deck_repository: DeckRepositoryProtocol,
    ) -> None:
        self.flashcard_repository = flashcard_repository
        self.deck_repository = deck_repository

    def get_flashcards(self, deck_id: UUID, user_id: UUID) -> list[Flashcard]:
        """
        Get all flashcards of a deck owned by the user, newest first.

        Raises:
            DeckNotFoundError: If deck is not found
        """
        deck_id_vo = DeckId(deck_id)
        if not self.deck_repository.find_by_id(deck_id_vo, UserId(user_id)):
            raise DeckNotFoundError(deck_id)
        return self.flashcard_repository.find_by_deck(deck_id_vo)
