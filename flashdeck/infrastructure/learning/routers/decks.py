"""API routes for deck management."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from flashdeck.application.learning.use_cases.decks.deck_use_case import DeckUseCase
from flashdeck.core import container
from flashdeck.dependencies import api_rate_limit
from flashdeck.domain.common.exceptions import DomainError
from flashdeck.domain.learning.entities.deck import Deck as DeckEntity
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.di import inject_use_case
from flashdeck.infrastructure.common.schemas import Pagination
from flashdeck.infrastructure.identity.dependencies import CurrentUserId
from flashdeck.infrastructure.learning.schemas.deck_schemas import (
    Deck,
    DeckCreateRequest,
    DeckListItem,
    DeckListResponse,
    DeckUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/decks", tags=["decks"], dependencies=[Depends(api_rate_limit)])


def _to_schema(deck: DeckEntity) -> Deck:
    return Deck(
        id=deck.id.value,
        name=deck.name,
        created_at=deck.created_at,
        updated_at=deck.updated_at,
    )


@router.post("", response_model=Deck, status_code=status.HTTP_201_CREATED)
def create_deck(
    request: DeckCreateRequest,
    user_id: CurrentUserId,
    use_case: DeckUseCase = Depends(inject_use_case(container.deck_use_case)),
) -> Deck:
    """Create a new deck for the current user."""
    try:
        return _to_schema(use_case.create_deck(user_id=user_id, name=request.name))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create deck: {e!s}", exc_info=True)
        raise FlashdeckError("An unexpected error occurred. Please try again later.") from e


@router.get("", response_model=DeckListResponse, status_code=status.HTTP_200_OK)
def list_decks(
    user_id: CurrentUserId,
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int = Query(20, ge=1, le=100, description="Decks per page"),
    use_case: DeckUseCase = Depends(inject_use_case(container.deck_use_case)),
) -> DeckListResponse:
    """
    List the current user's decks with flashcard counts.

    Args:
        page: 1-based page number
        limit: Decks per page (max 100)

    Returns:
        A page of decks and pagination metadata
    """
    try:
        result = use_case.list_decks(user_id=user_id, page=page, limit=limit)
        return DeckListResponse(
            data=[
                DeckListItem(
                    id=item.deck.id.value,
                    name=item.deck.name,
                    created_at=item.deck.created_at,
                    flashcard_count=item.flashcard_count,
                )
                for item in result.items
            ],
            pagination=Pagination(
                current_page=result.page,
                total_pages=result.total_pages,
                total_items=result.total,
            ),
        )
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list decks: {e!s}", exc_info=True)
        raise FlashdeckError("An unexpected error occurred. Please try again later.") from e


@router.get("/{deck_id}", response_model=Deck, status_code=status.HTTP_200_OK)
def get_deck(
    deck_id: UUID,
    user_id: CurrentUserId,
    use_case: DeckUseCase = Depends(inject_use_case(container.deck_use_case)),
) -> Deck:
    """Get a single deck owned by the current user."""
    try:
        return _to_schema(use_case.get_deck(deck_id=deck_id, user_id=user_id))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get deck {deck_id}: {e!s}", exc_info=True)
        raise FlashdeckError("An unexpected error occurred. Please try again later.") from e


@router.patch("/{deck_id}", response_model=Deck, status_code=status.HTTP_200_OK)
def rename_deck(
    deck_id: UUID,
    request: DeckUpdateRequest,
    user_id: CurrentUserId,
    use_case: DeckUseCase = Depends(inject_use_case(container.deck_use_case)),
) -> Deck:
    """Rename a deck owned by the current user."""
    try:
        return _to_schema(use_case.rename_deck(deck_id=deck_id, user_id=user_id, name=request.name))
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to rename deck {deck_id}: {e!s}", exc_info=True)
        raise FlashdeckError("An unexpected error occurred. Please try again later.") from e


@router.delete("/{deck_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_deck(
    deck_id: UUID,
    user_id: CurrentUserId,
    use_case: DeckUseCase = Depends(inject_use_case(container.deck_use_case)),
) -> Response:
    """
    Delete a deck (hard delete).

    Removes the deck's flashcards and generation records as well.
    """
    try:
        use_case.delete_deck(deck_id=deck_id, user_id=user_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    except (FlashdeckError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete deck {deck_id}: {e!s}", exc_info=True)
        raise FlashdeckError("An unexpected error occurred. Please try again later.") from e
