"""Use case for deleting flashcards."""

from uuid import UUID

import structlog

from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.use_cases.exceptions import FlashcardNotFoundError
from flashdeck.domain.common.value_objects.ids import FlashcardId, UserId

logger = structlog.get_logger(__name__)


class DeleteFlashcardUseCase:
    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        self.flashcard_repository = flashcard_repository

    def delete_flashcard(self, flashcard_id: UUID, user_id: UUID) -> None:
        """
        Delete a flashcard.

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """
        deleted = self.flashcard_repository.delete(FlashcardId(flashcard_id), UserId(user_id))
        if not deleted:
            raise FlashcardNotFoundError(flashcard_id)

        logger.info("deleted_flashcard", flashcard_id=str(flashcard_id))
