"""Use case for creating flashcards manually."""

from uuid import UUID

import structlog

from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.constants import SOURCE_MANUAL
from flashdeck.domain.common.value_objects.ids import DeckId, UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.exceptions import DeckNotFoundError

logger = structlog.get_logger(__name__)


class CreateFlashcardUseCase:
    """Use case for creating a manual flashcard in a deck."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        deck_repository: DeckRepositoryProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository
        self.deck_repository = deck_repository

    def create_flashcard(self, deck_id: UUID, user_id: UUID, front: str, back: str) -> Flashcard:
        """
        Create a new flashcard in a deck.

        Args:
            deck_id: ID of the deck
            user_id: ID of the user
            front: Question side
            back: Answer side

        Returns:
            Created flashcard domain entity

        Raises:
            DeckNotFoundError: If deck is not found
        """
        deck_id_vo = DeckId(deck_id)

        deck = self.deck_repository.find_by_id(deck_id_vo, UserId(user_id))
        if not deck:
            raise DeckNotFoundError(deck_id)

        flashcard = Flashcard.create(
            deck_id=deck_id_vo, front=front, back=back, source=SOURCE_MANUAL
        )
        flashcard = self.flashcard_repository.save(flashcard)

        logger.info("created_flashcard", flashcard_id=str(flashcard.id), deck_id=str(deck_id))
        return flashcard
