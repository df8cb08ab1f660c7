"""Use case for committing reviewed AI candidates to a deck."""

from uuid import UUID

import structlog

from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from flashdeck.application.learning.protocols.generation_repository import (
    GenerationRepositoryProtocol,
)
from flashdeck.application.learning.use_cases.dtos.generation_dtos import (
    BatchCreationResult,
    BatchFlashcardInput,
)
from flashdeck.constants import MAX_BATCH_FLASHCARDS, SOURCE_AI_EDITED, SOURCE_AI_FULL
from flashdeck.domain.common.value_objects import DeckId, GenerationId, UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.exceptions import DeckNotFoundError, GenerationNotFoundError, ValidationError

logger = structlog.get_logger(__name__)


class CreateFlashcardsFromGenerationUseCase:
    """Insert accepted candidates and record acceptance metrics on their generation."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        flashcard_repository: FlashcardRepositoryProtocol,
        generation_repository: GenerationRepositoryProtocol,
    ) -> None:
        self.deck_repository = deck_repository
        self.flashcard_repository = flashcard_repository
        self.generation_repository = generation_repository

    def create_from_generation(
        self,
        deck_id: UUID,
        user_id: UUID,
        generation_id: UUID,
        flashcards: list[BatchFlashcardInput],
    ) -> BatchCreationResult:
        """
        Create flashcards from a reviewed generation.

        Acceptance metrics are written after the flashcards are committed. A
        failure there is logged and does not undo the flashcards.

        Args:
            deck_id: Target deck
            user_id: Caller, must own the deck and the generation
            generation_id: Generation the candidates came from
            flashcards: Accepted candidates with their provenance

        Returns:
            Number of created flashcards and the generation id

        Raises:
            ValidationError: If the batch is empty or too large
            DeckNotFoundError: If the deck does not exist or belongs to someone else
            GenerationNotFoundError: If the generation does not belong to the
                user and deck
        """
        if not flashcards:
            raise ValidationError("At least one flashcard is required")
        if len(flashcards) > MAX_BATCH_FLASHCARDS:
            raise ValidationError(
                f"Cannot create more than {MAX_BATCH_FLASHCARDS} flashcards at once"
            )

        deck_id_vo = DeckId(deck_id)
        user_id_vo = UserId(user_id)
        generation_id_vo = GenerationId(generation_id)

        deck = self.deck_repository.find_by_id(deck_id_vo, user_id_vo)
        if not deck:
            raise DeckNotFoundError(deck_id)

        generation = self.generation_repository.find_by_id(
            generation_id_vo, user_id_vo, deck_id_vo
        )
        if not generation:
            raise GenerationNotFoundError(generation_id)

        entities = [
            Flashcard.create(
                deck_id=deck_id_vo,
                front=item.front,
                back=item.back,
                source=item.source,
                generation_id=generation_id_vo,
            )
            for item in flashcards
        ]
        created = self.flashcard_repository.save_all(entities)

        unedited = sum(1 for item in flashcards if item.source == SOURCE_AI_FULL)
        edited = sum(1 for item in flashcards if item.source == SOURCE_AI_EDITED)

        try:
            generation.record_acceptance(unedited=unedited, edited=edited)
            self.generation_repository.save(generation)
        except Exception as e:
            logger.error(
                "generation_metrics_update_failed",
                generation_id=str(generation_id),
                error=str(e),
                exc_info=True,
            )

        logger.info(
            "created_flashcards_from_generation",
            deck_id=str(deck_id),
            generation_id=str(generation_id),
            created_count=len(created),
            accepted_unedited=unedited,
            accepted_edited=edited,
        )
        return BatchCreationResult(created_count=len(created), generation_id=generation_id_vo)
