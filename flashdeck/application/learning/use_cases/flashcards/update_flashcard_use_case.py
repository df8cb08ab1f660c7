"""Use case for updating flashcards."""

from uuid import UUID

import structlog

from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.use_cases.exceptions import FlashcardNotFoundError
from flashdeck.domain.common.value_objects.ids import FlashcardId, UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class UpdateFlashcardUseCase:
    """Use case for updating flashcards."""

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
    ) -> None:
        """Initialize use case with repository protocols."""
        self.flashcard_repository = flashcard_repository

    def update_flashcard(
        self,
        flashcard_id: UUID,
        user_id: UUID,
        front: str | None = None,
        back: str | None = None,
    ) -> Flashcard:
        """
        Update a flashcard's front and/or back.

        Args:
            flashcard_id: ID of the flashcard to update
            user_id: ID of the user
            front: New front text (optional)
            back: New back text (optional)

        Returns:
            Updated flashcard domain entity

        Raises:
            FlashcardNotFoundError: If flashcard is not found
            ValidationError: If neither front nor back is provided
        """
        if front is None and back is None:
            raise ValidationError("At least one of front or back must be provided")

        flashcard_id_vo = FlashcardId(flashcard_id)
        user_id_vo = UserId(user_id)

        flashcard = self.flashcard_repository.find_by_id(flashcard_id_vo, user_id_vo)
        if not flashcard:
            raise FlashcardNotFoundError(flashcard_id)

        if front is not None:
            flashcard.update_front(front)
        if back is not None:
            flashcard.update_back(back)

        flashcard = self.flashcard_repository.save(flashcard)

        logger.info("updated_flashcard", flashcard_id=str(flashcard_id))
        return flashcard
