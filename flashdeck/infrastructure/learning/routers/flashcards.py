"""API routes for flashcard management."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from flashdeck.application.learning.use_cases.flashcards.create_flashcard_use_case import (
    CreateFlashcardUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.delete_flashcard_use_case import (
    DeleteFlashcardUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.get_flashcards_by_deck_use_case import (
    GetFlashcardsByDeckUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.update_flashcard_use_case import (
    UpdateFlashcardUseCase,
)
from flashdeck.core import container
from flashdeck.dependencies import api_rate_limit
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.learning.entities.flashcard import Flashcard as FlashcardEntity
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.common.schemas import DataResponse
from flashdeck.infrastructure.identity.dependencies import CurrentUserId
from flashdeck.infrastructure.learning.schemas.flashcard_schemas import (
    Flashcard,
    FlashcardCreateRequest,
    FlashcardUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["flashcards"], dependencies=[Depends(api_rate_limit)])


def _to_schema(flashcard: FlashcardEntity) -> Flashcard:
    return Flashcard(
        id=flashcard.id.value,
        deck_id=flashcard.deck_id.value,
        generation_id=flashcard.generation_id.value if flashcard.generation_id else None,
        front=flashcard.front,
        back=flashcard.back,
        source=flashcard.source,
        created_at=flashcard.created_at,
        updated_at=flashcard.updated_at,
    )


@router.get(
    "/decks/{deck_id}/flashcards",
    response_model=DataResponse[Flashcard],
    status_code=status.HTTP_200_OK,
)
def list_flashcards(
    deck_id: UUID,
    user_id: CurrentUserId,
    use_case: GetFlashcardsByDeckUseCase = Depends(
        inject_use_case(container.get_flashcards_by_deck_use_case)
    ),
) -> DataResponse[Flashcard]:
    """List all flashcards of a deck, newest first."""
    try:
        flashcards = use_case.get_flashcards(deck_id=deck_id, user_id=user_id)
        return DataResponse[Flashcard](data=[_to_schema(fc) for fc in flashcards])
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list flashcards for deck {deck_id}: {e!s}", exc_info=True)
        raise FlashdeckError("An unexpected error occurred. Please try again later.") from e


@router.post(
    "/decks/{deck_id}/flashcards",
    response_model=Flashcard,
    status_code=status.HTTP_201_CREATED,
)
def create_flashcard(
    deck_id: UUID,
    request: FlashcardCreateRequest,
    user_id: CurrentUserId,
    use_case: CreateFlashcardUseCase = Depends(
        inject_use_case(container.create_flashcard_use_case)
    ),
) -> Flashcard:
    """
    Create a manual flashcard in a deck.

    Raises:
        DeckNotFoundError: Unknown deck or owned by another user (404)
    """
    try:
        flashcard = use_case.create_flashcard(
            deck_id=deck_id, user_id=user_id, front=request.front, back=request.back
        )
        return _to_schema(flashcard)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create flashcard in deck {deck_id}: {e!s}", exc_info=True)
        raise FlashdeckError("An unexpected error occurred. Please try again later.") from e


@router.patch(
    "/flashcards/{flashcard_id}",
    response_model=Flashcard,
    status_code=status.HTTP_200_OK,
)
def update_flashcard(
    flashcard_id: UUID,
    request: FlashcardUpdateRequest,
    user_id: CurrentUserId,
    use_case: UpdateFlashcardUseCase = Depends(
        inject_use_case(container.update_flashcard_use_case)
    ),
) -> Flashcard:
    """
    Update a flashcard's front and/or back.

    Args:
        flashcard_id: ID of the flashcard to update
        request: New front and/or back

    Returns:
        Updated flashcard
    """
    try:
        flashcard = use_case.update_flashcard(
            flashcard_id=flashcard_id,
            user_id=user_id,
            front=request.front,
            back=request.back,
        )
        return _to_schema(flashcard)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise FlashdeckError("An unexpected error occurred. Please try again later.") from e


@router.delete("/flashcards/{flashcard_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_flashcard(
    flashcard_id: UUID,
    user_id: CurrentUserId,
    use_case: DeleteFlashcardUseCase = Depends(
        inject_use_case(container.delete_flashcard_use_case)
    ),
) -> Response:
    """Delete a flashcard."""
    try:
        use_case.delete_flashcard(flashcard_id=flashcard_id, user_id=user_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise FlashdeckError("An unexpected error occurred. Please try again later.") from e
