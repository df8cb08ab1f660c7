"""Mapper for Generation ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects import ContentHash, DeckId, GenerationId, UserId
from flashdeck.domain.learning.entities.generation import Generation
from flashdeck.models import Generation as GenerationORM


class GenerationMapper:
    """Mapper for Generation ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: GenerationORM) -> Generation:
        return Generation.create_with_id(
            id=GenerationId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            deck_id=DeckId(orm_model.deck_id),
            model=orm_model.model,
            generated_count=orm_model.generated_count,
            source_text_hash=ContentHash(orm_model.source_text_hash),
            source_text_length=orm_model.source_text_length,
            generation_duration=orm_model.generation_duration,
            accepted_unedited_count=orm_model.accepted_unedited_count,
            accepted_edited_count=orm_model.accepted_edited_count,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(
        self, domain_entity: Generation, orm_model: GenerationORM | None = None
    ) -> GenerationORM:
        if orm_model:
            # Only acceptance metrics change after creation
            orm_model.accepted_unedited_count = domain_entity.accepted_unedited_count
            orm_model.accepted_edited_count = domain_entity.accepted_edited_count
            return orm_model

        return GenerationORM(
            id=domain_entity.id.value,
            user_id=domain_entity.user_id.value,
            deck_id=domain_entity.deck_id.value,
            model=domain_entity.model,
            generated_count=domain_entity.generated_count,
            source_text_hash=domain_entity.source_text_hash.value,
            source_text_length=domain_entity.source_text_length,
            generation_duration=domain_entity.generation_duration,
            accepted_unedited_count=domain_entity.accepted_unedited_count,
            accepted_edited_count=domain_entity.accepted_edited_count,
        )
