"""Mapper for Flashcard ORM ↔ Domain conversion."""

from typing import cast

from flashdeck.constants import FlashcardSource
from flashdeck.domain.common.value_objects import DeckId, FlashcardId, GenerationId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.models import Flashcard as FlashcardORM


class FlashcardMapper:
    """Mapper for Flashcard ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: FlashcardORM) -> Flashcard:
        """Convert ORM model to domain entity."""
        return Flashcard.create_with_id(
            id=FlashcardId(orm_model.id),
            deck_id=DeckId(orm_model.deck_id),
            front=orm_model.front,
            back=orm_model.back,
            source=cast(FlashcardSource, orm_model.source),
            generation_id=GenerationId(orm_model.generation_id)
            if orm_model.generation_id
            else None,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(
        self, domain_entity: Flashcard, orm_model: FlashcardORM | None = None
    ) -> FlashcardORM:
        """Convert domain entity to ORM model."""
        generation_id = domain_entity.generation_id.value if domain_entity.generation_id else None
        if orm_model:
            # Update existing
            orm_model.deck_id = domain_entity.deck_id.value
            orm_model.front = domain_entity.front
            orm_model.back = domain_entity.back
            orm_model.source = domain_entity.source
            orm_model.generation_id = generation_id
            return orm_model

        # Create new
        return FlashcardORM(
            id=domain_entity.id.value,
            deck_id=domain_entity.deck_id.value,
            front=domain_entity.front,
            back=domain_entity.back,
            source=domain_entity.source,
            generation_id=generation_id,
        )
