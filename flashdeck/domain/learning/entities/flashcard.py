"""
Flashcard entity for spaced repetition learning.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import get_args

from flashdeck.constants import (
    MAX_FLASHCARD_BACK_LENGTH,
    MAX_FLASHCARD_FRONT_LENGTH,
    SOURCE_MANUAL,
    FlashcardSource,
)
from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import DeckId, FlashcardId, GenerationId


def validate_front(front: str) -> str:
    """Strip and bound-check the front (question) side."""
    cleaned = (front or "").strip()
    if not cleaned:
        raise ValidationError("Front cannot be empty", field="front")
    if len(cleaned) > MAX_FLASHCARD_FRONT_LENGTH:
        raise ValidationError(
            f"Front cannot exceed {MAX_FLASHCARD_FRONT_LENGTH} characters", field="front"
        )
    return cleaned


def validate_back(back: str) -> str:
    """Strip and bound-check the back (answer) side."""
    cleaned = (back or "").strip()
    if not cleaned:
        raise ValidationError("Back cannot be empty", field="back")
    if len(cleaned) > MAX_FLASHCARD_BACK_LENGTH:
        raise ValidationError(
            f"Back cannot exceed {MAX_FLASHCARD_BACK_LENGTH} characters", field="back"
        )
    return cleaned


@dataclass
class Flashcard(Entity[FlashcardId]):
    """
    Flashcard belonging to a deck.

    Business Rules:
    - Front is 1..200 characters, back is 1..500 characters (after stripping)
    - Source records provenance: manual, ai-full (accepted verbatim) or
      ai-edited (accepted after user edits)
    - AI-sourced flashcards reference the generation that produced them,
      manual ones never do
    """

    id: FlashcardId
    deck_id: DeckId
    front: str
    back: str
    source: FlashcardSource
    generation_id: GenerationId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.front = validate_front(self.front)
        self.back = validate_back(self.back)
        if self.source not in get_args(FlashcardSource):
            raise ValidationError(f"Unknown flashcard source '{self.source}'", field="source")
        if self.source == SOURCE_MANUAL and self.generation_id is not None:
            raise ValidationError("Manual flashcards cannot reference a generation")
        if self.source != SOURCE_MANUAL and self.generation_id is None:
            raise ValidationError("AI flashcards must reference their generation")

    def update_front(self, front: str) -> None:
        """
        Update the front side.

        Raises:
            ValidationError: If front is empty or too long
        """
        self.front = validate_front(front)

    def update_back(self, back: str) -> None:
        """
        Update the back side.

        Raises:
            ValidationError: If back is empty or too long
        """
        self.back = validate_back(back)

    @classmethod
    def create(
        cls,
        deck_id: DeckId,
        front: str,
        back: str,
        source: FlashcardSource = SOURCE_MANUAL,
        generation_id: GenerationId | None = None,
    ) -> "Flashcard":
        """Create a new flashcard with a fresh identifier."""
        return cls(
            id=FlashcardId.generate(),
            deck_id=deck_id,
            front=front,
            back=back,
            source=source,
            generation_id=generation_id,
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardId,
        deck_id: DeckId,
        front: str,
        back: str,
        source: FlashcardSource,
        created_at: datetime,
        updated_at: datetime,
        generation_id: GenerationId | None = None,
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence."""
        return cls(
            id=id,
            deck_id=deck_id,
            front=front,
            back=back,
            source=source,
            generation_id=generation_id,
            created_at=created_at,
            updated_at=updated_at,
        )
