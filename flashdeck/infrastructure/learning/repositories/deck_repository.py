"""Repository for Deck domain entities."""

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects.ids import DeckId, UserId
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.infrastructure.learning.mappers.deck_mapper import DeckMapper
from flashdeck.models import Deck as DeckORM
from flashdeck.models import Flashcard as FlashcardORM


class DeckRepository:
    """Repository for Deck domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = DeckMapper()

    def find_by_id(self, deck_id: DeckId, user_id: UserId) -> Deck | None:
        """
        Find a deck by ID with user ownership check.

        Args:
            deck_id: The deck ID
            user_id: The user ID for ownership verification

        Returns:
            Deck entity if found and owned by user, None otherwise
        """
        stmt = select(DeckORM).where(
            DeckORM.id == deck_id.value,
            DeckORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_page_with_counts(
        self, user_id: UserId, offset: int, limit: int
    ) -> list[tuple[Deck, int]]:
        """
        Get a page of the user's decks with flashcard counts.

        Returns:
            List of (deck, flashcard_count) ordered by created_at DESC
        """
        flashcard_count = (
            select(func.count(FlashcardORM.id))
            .where(FlashcardORM.deck_id == DeckORM.id)
            .correlate(DeckORM)
            .scalar_subquery()
        )
        stmt = (
            select(DeckORM, flashcard_count)
            .where(DeckORM.user_id == user_id.value)
            .order_by(DeckORM.created_at.desc(), DeckORM.name)
            .offset(offset)
            .limit(limit)
        )
        rows = self.db.execute(stmt).all()
        return [(self.mapper.to_domain(deck), count or 0) for deck, count in rows]

    def count_by_user(self, user_id: UserId) -> int:
        stmt = select(func.count(DeckORM.id)).where(DeckORM.user_id == user_id.value)
        return self.db.execute(stmt).scalar() or 0

    def save(self, deck: Deck) -> Deck:
        """
        Save a deck entity (create or update).

        Returns:
            Saved deck entity with database-generated values
        """
        orm_model = self.db.get(DeckORM, deck.id.value)
        if orm_model:
            self.mapper.to_orm(deck, orm_model)
        else:
            orm_model = self.mapper.to_orm(deck)
            self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, deck_id: DeckId, user_id: UserId) -> bool:
        """
        Delete a deck with ownership check.

        Flashcards and generations of the deck go with it.

        Returns:
            True if deleted, False if not found
        """
        stmt = select(DeckORM).where(
            DeckORM.id == deck_id.value,
            DeckORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if not orm_model:
            return False

        self.db.delete(orm_model)
        self.db.commit()
        return True
