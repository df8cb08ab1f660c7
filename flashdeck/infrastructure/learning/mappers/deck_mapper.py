"""Mapper for Deck ORM ↔ Domain conversion."""

from flashdeck.domain.common.value_objects import DeckId, UserId
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.models import Deck as DeckORM


class DeckMapper:
    """Mapper for Deck ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: DeckORM) -> Deck:
        return Deck.create_with_id(
            id=DeckId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            name=orm_model.name,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Deck, orm_model: DeckORM | None = None) -> DeckORM:
        if orm_model:
            orm_model.user_id = domain_entity.user_id.value
            orm_model.name = domain_entity.name
            return orm_model

        return DeckORM(
            id=domain_entity.id.value,
            user_id=domain_entity.user_id.value,
            name=domain_entity.name,
        )
