"""Pydantic schemas for AI generation and batch commit endpoints."""

from uuid import UUID

from pydantic import Field

from flashdeck.constants import (
    MAX_BATCH_FLASHCARDS,
    MAX_FLASHCARD_BACK_LENGTH,
    MAX_FLASHCARD_FRONT_LENGTH,
    MAX_SOURCE_TEXT_LENGTH,
    MIN_SOURCE_TEXT_LENGTH,
    AIFlashcardSource,
)
from flashdeck.infrastructure.common.schemas import CamelModel


class GenerateFlashcardsRequest(CamelModel):
    """Schema for requesting flashcard candidates."""

    source_text: str = Field(
        ...,
        min_length=MIN_SOURCE_TEXT_LENGTH,
        max_length=MAX_SOURCE_TEXT_LENGTH,
        description="Text to generate flashcards from",
    )
    deck_id: UUID = Field(..., description="Deck the candidates are meant for")


class FlashcardCandidate(CamelModel):
    """Schema for a single generated candidate."""

    front: str
    back: str


class GenerateFlashcardsResponse(CamelModel):
    generation_id: UUID
    candidates: list[FlashcardCandidate]


class BatchFlashcardItem(CamelModel):
    """Schema for one accepted candidate in a batch commit."""

    front: str = Field(..., min_length=1, max_length=MAX_FLASHCARD_FRONT_LENGTH)
    back: str = Field(..., min_length=1, max_length=MAX_FLASHCARD_BACK_LENGTH)
    source: AIFlashcardSource = Field(..., description="ai-full or ai-edited")


class BatchCreateFlashcardsRequest(CamelModel):
    """Schema for committing reviewed candidates to a deck."""

    generation_id: UUID
    flashcards: list[BatchFlashcardItem] = Field(
        ..., min_length=1, max_length=MAX_BATCH_FLASHCARDS
    )


class BatchCreateFlashcardsResponse(CamelModel):
    created_count: int
    generation_id: UUID
