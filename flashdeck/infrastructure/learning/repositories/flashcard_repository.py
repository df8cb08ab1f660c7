"""Repository for Flashcard domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from flashdeck.domain.common.value_objects.ids import DeckId, FlashcardId, UserId
from flashdeck.domain.learning.entities.flashcard import Flashcard
from flashdeck.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper
from flashdeck.models import Deck as DeckORM
from flashdeck.models import Flashcard as FlashcardORM


class FlashcardRepository:
    """Repository for Flashcard domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FlashcardMapper()

    def _find_owned(self, flashcard_id: FlashcardId, user_id: UserId) -> FlashcardORM | None:
        stmt = (
            select(FlashcardORM)
            .join(DeckORM, FlashcardORM.deck_id == DeckORM.id)
            .where(
                FlashcardORM.id == flashcard_id.value,
                DeckORM.user_id == user_id.value,
            )
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def find_by_id(self, flashcard_id: FlashcardId, user_id: UserId) -> Flashcard | None:
        """
        Find a flashcard by ID, checking ownership through its deck.

        Args:
            flashcard_id: The flashcard ID
            user_id: The user ID for ownership verification

        Returns:
            Flashcard entity if found and owned by user, None otherwise
        """
        orm_model = self._find_owned(flashcard_id, user_id)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_deck(self, deck_id: DeckId) -> list[Flashcard]:
        """
        Get all flashcards for a deck.

        Returns:
            List of flashcard entities ordered by created_at DESC
        """
        stmt = (
            select(FlashcardORM)
            .where(FlashcardORM.deck_id == deck_id.value)
            .order_by(FlashcardORM.created_at.desc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save(self, flashcard: Flashcard) -> Flashcard:
        """
        Save a flashcard entity (create or update).

        Returns:
            Saved flashcard entity with database-generated values
        """
        orm_model = self.db.get(FlashcardORM, flashcard.id.value)
        if orm_model:
            self.mapper.to_orm(flashcard, orm_model)
        else:
            orm_model = self.mapper.to_orm(flashcard)
            self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def save_all(self, flashcards: list[Flashcard]) -> list[Flashcard]:
        """
        Insert several new flashcards in one transaction.

        Returns:
            The saved flashcards, in input order
        """
        orm_models = [self.mapper.to_orm(fc) for fc in flashcards]
        self.db.add_all(orm_models)
        self.db.commit()
        for orm_model in orm_models:
            self.db.refresh(orm_model)
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def delete(self, flashcard_id: FlashcardId, user_id: UserId) -> bool:
        """
        Delete a flashcard.

        Returns:
            True if deleted, False if not found
        """
        flashcard_orm = self._find_owned(flashcard_id, user_id)
        if not flashcard_orm:
            return False

        self.db.delete(flashcard_orm)
        self.db.commit()
        return True
