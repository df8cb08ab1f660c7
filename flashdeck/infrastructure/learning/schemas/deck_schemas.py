"""Pydantic schemas for Deck API request/response validation."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from flashdeck.constants import MAX_DECK_NAME_LENGTH
from flashdeck.infrastructure.common.schemas import CamelModel, Pagination


class DeckCreateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=MAX_DECK_NAME_LENGTH)


class DeckUpdateRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=MAX_DECK_NAME_LENGTH)


class Deck(CamelModel):
    """Schema for Deck response."""

    id: UUID
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class DeckListItem(CamelModel):
    id: UUID
    name: str
    created_at: datetime | None = None
    flashcard_count: int


class DeckListResponse(CamelModel):
    data: list[DeckListItem]
    pagination: Pagination
