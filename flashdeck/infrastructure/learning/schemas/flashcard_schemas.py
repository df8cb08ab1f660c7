"""Pydantic schemas for Flashcard API request/response validation."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import Field, model_validator

from flashdeck.constants import (
    MAX_FLASHCARD_BACK_LENGTH,
    MAX_FLASHCARD_FRONT_LENGTH,
    FlashcardSource,
)
from flashdeck.infrastructure.common.schemas import CamelModel


class Flashcard(CamelModel):
    """Schema for Flashcard response."""

    id: UUID
    deck_id: UUID
    generation_id: UUID | None
    front: str
    back: str
    source: FlashcardSource
    created_at: datetime | None = None
    updated_at: datetime | None = None


class FlashcardCreateRequest(CamelModel):
    """Schema for creating a flashcard manually."""

    front: str = Field(..., min_length=1, max_length=MAX_FLASHCARD_FRONT_LENGTH)
    back: str = Field(..., min_length=1, max_length=MAX_FLASHCARD_BACK_LENGTH)
    source: Literal["manual"] = Field(
        "manual", description="AI flashcards are created through the batch endpoint"
    )


class FlashcardUpdateRequest(CamelModel):
    """Schema for updating a flashcard. At least one side is required."""

    front: str | None = Field(None, min_length=1, max_length=MAX_FLASHCARD_FRONT_LENGTH)
    back: str | None = Field(None, min_length=1, max_length=MAX_FLASHCARD_BACK_LENGTH)

    @model_validator(mode="after")
    def require_one_field(self) -> "FlashcardUpdateRequest":
        if self.front is None and self.back is None:
            raise ValueError("At least one field (front or back) must be provided")
        return self
