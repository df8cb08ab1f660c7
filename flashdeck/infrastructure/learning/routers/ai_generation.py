"""API routes for AI flashcard generation."""

import logging

from fastapi import APIRouter, Depends, status

from flashdeck.application.learning.use_cases.generation import (
    GenerateFlashcardCandidatesUseCase,
)
from flashdeck.core import container
from flashdeck.dependencies import ai_rate_limit, require_ai_enabled
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.identity.dependencies import CurrentUserId
from flashdeck.infrastructure.learning.schemas.generation_schemas import (
    FlashcardCandidate,
    GenerateFlashcardsRequest,
    GenerateFlashcardsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["ai"], dependencies=[Depends(ai_rate_limit)])


@router.post(
    "/generate-flashcards",
    response_model=GenerateFlashcardsResponse,
    status_code=status.HTTP_200_OK,
)
@require_ai_enabled
async def generate_flashcards(
    request: GenerateFlashcardsRequest,
    user_id: CurrentUserId,
    use_case: GenerateFlashcardCandidatesUseCase = Depends(
        inject_use_case(container.generate_flashcard_candidates_use_case)
    ),
) -> GenerateFlashcardsResponse:
    """
    Generate flashcard candidates from source text.

    The candidates are not saved; the client reviews them and commits the
    accepted ones through the batch endpoint.

    Raises:
        RateLimitExceededError: Caller used up the AI quota (429)
        DeckNotFoundError: Unknown deck or owned by another user (404)
        CandidateGenerationError: Model call or persistence failed; the
            status reflects the kind of failure
    """
    try:
        result = await use_case.generate_candidates(
            source_text=request.source_text,
            deck_id=request.deck_id,
            user_id=user_id,
        )
        return GenerateFlashcardsResponse(
            generation_id=result.generation_id.value,
            candidates=[
                FlashcardCandidate(front=c.front, back=c.back) for c in result.candidates
            ],
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to generate flashcards for deck {request.deck_id}: {e!s}", exc_info=True
        )
        raise FlashdeckError("An unexpected error occurred. Please try again later.") from e
