"""Repository for Generation domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects.ids import DeckId, GenerationId, UserId
from flashdeck.domain.learning.entities.generation import Generation
from flashdeck.infrastructure.learning.mappers.generation_mapper import GenerationMapper
from flashdeck.models import Generation as GenerationORM


class GenerationRepository:
    """Repository for Generation domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = GenerationMapper()

    def find_by_id(
        self, generation_id: GenerationId, user_id: UserId, deck_id: DeckId
    ) -> Generation | None:
        """
        Find a generation owned by the user and produced for the deck.

        Returns:
            Generation entity if found, None otherwise
        """
        stmt = select(GenerationORM).where(
            GenerationORM.id == generation_id.value,
            GenerationORM.user_id == user_id.value,
            GenerationORM.deck_id == deck_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def save(self, generation: Generation) -> Generation:
        """
        Save a generation entity (create or update).

        A failed commit is rolled back so the session stays usable.
        """
        orm_model = self.db.get(GenerationORM, generation.id.value)
        if orm_model:
            self.mapper.to_orm(generation, orm_model)
        else:
            orm_model = self.mapper.to_orm(generation)
            self.db.add(orm_model)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)
