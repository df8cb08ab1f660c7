"""
Generation entity: one invocation of the AI flashcard-creation flow.

Kept for metrics and audit. The acceptance counts are written once, when the
reviewed candidates are committed to a deck.
"""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import BusinessRuleViolationError, ValidationError
from flashdeck.domain.common.value_objects import ContentHash, DeckId, GenerationId, UserId


@dataclass
class Generation(Entity[GenerationId]):
    """
    Record of a single model call that produced flashcard candidates.

    Business Rules:
    - Only created after the model answered successfully
    - generated_count and duration are non-negative
    - Acceptance counts can be recorded only once
    """

    id: GenerationId
    user_id: UserId
    deck_id: DeckId
    model: str
    generated_count: int
    source_text_hash: ContentHash
    source_text_length: int
    generation_duration: int  # milliseconds
    accepted_unedited_count: int | None = None
    accepted_edited_count: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.model:
            raise ValidationError("Model identifier cannot be empty", field="model")
        if self.generated_count < 0:
            raise ValidationError("Generated count cannot be negative", field="generated_count")
        if self.source_text_length < 0:
            raise ValidationError(
                "Source text length cannot be negative", field="source_text_length"
            )
        if self.generation_duration < 0:
            raise ValidationError(
                "Generation duration cannot be negative", field="generation_duration"
            )

    @property
    def has_acceptance_metrics(self) -> bool:
        return self.accepted_unedited_count is not None or self.accepted_edited_count is not None

    def is_owned_by(self, user_id: UserId, deck_id: DeckId) -> bool:
        return self.user_id == user_id and self.deck_id == deck_id

    def record_acceptance(self, unedited: int, edited: int) -> None:
        """
        Store how many candidates the user kept, verbatim and after editing.

        Raises:
            ValidationError: If a count is negative
            BusinessRuleViolationError: If metrics were already recorded
        """
        if unedited < 0 or edited < 0:
            raise ValidationError("Acceptance counts cannot be negative")
        if self.has_acceptance_metrics:
            raise BusinessRuleViolationError(
                "acceptance_recorded_once",
                f"Acceptance metrics for generation {self.id} were already recorded",
            )
        self.accepted_unedited_count = unedited
        self.accepted_edited_count = edited

    @classmethod
    def create(
        cls,
        user_id: UserId,
        deck_id: DeckId,
        model: str,
        generated_count: int,
        source_text_hash: ContentHash,
        source_text_length: int,
        generation_duration: int,
    ) -> "Generation":
        """Create a record for a generation that just completed."""
        return cls(
            id=GenerationId.generate(),
            user_id=user_id,
            deck_id=deck_id,
            model=model,
            generated_count=generated_count,
            source_text_hash=source_text_hash,
            source_text_length=source_text_length,
            generation_duration=generation_duration,
        )

    @classmethod
    def create_with_id(
        cls,
        id: GenerationId,
        user_id: UserId,
        deck_id: DeckId,
        model: str,
        generated_count: int,
        source_text_hash: ContentHash,
        source_text_length: int,
        generation_duration: int,
        accepted_unedited_count: int | None,
        accepted_edited_count: int | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Generation":
        """Reconstitute a generation from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            deck_id=deck_id,
            model=model,
            generated_count=generated_count,
            source_text_hash=source_text_hash,
            source_text_length=source_text_length,
            generation_duration=generation_duration,
            accepted_unedited_count=accepted_unedited_count,
            accepted_edited_count=accepted_edited_count,
            created_at=created_at,
            updated_at=updated_at,
        )
