"""API route for committing reviewed AI candidates."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, status

from flashdeck.application.learning.use_cases.dtos.generation_dtos import BatchFlashcardInput
from flashdeck.application.learning.use_cases.generation import (
    CreateFlashcardsFromGenerationUseCase,
)
from flashdeck.core import container
from flashdeck.dependencies import api_rate_limit
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.identity.dependencies import CurrentUserId
from flashdeck.infrastructure.learning.schemas.generation_schemas import (
    BatchCreateFlashcardsRequest,
    BatchCreateFlashcardsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks", tags=["flashcards"], dependencies=[Depends(api_rate_limit)])


@router.post(
    "/{deck_id}/flashcards/batch",
    response_model=BatchCreateFlashcardsResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_flashcards_batch(
    deck_id: UUID,
    request: BatchCreateFlashcardsRequest,
    user_id: CurrentUserId,
    use_case: CreateFlashcardsFromGenerationUseCase = Depends(
        inject_use_case(container.create_flashcards_from_generation_use_case)
    ),
) -> BatchCreateFlashcardsResponse:
    """
    Create flashcards in a deck from accepted AI candidates.

    Args:
        deck_id: Target deck
        request: Generation id and the accepted candidates with their source

    Returns:
        Number of created flashcards and the generation id

    Raises:
        DeckNotFoundError / GenerationNotFoundError: Ownership check failed (404)
    """
    try:
        result = use_case.create_from_generation(
            deck_id=deck_id,
            user_id=user_id,
            generation_id=request.generation_id,
            flashcards=[
                BatchFlashcardInput(front=item.front, back=item.back, source=item.source)
                for item in request.flashcards
            ],
        )
        return BatchCreateFlashcardsResponse(
            created_count=result.created_count,
            generation_id=result.generation_id.value,
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create flashcards for deck {deck_id}: {e!s}", exc_info=True)
        raise FlashdeckError("An unexpected error occurred. Please try again later.") from e
