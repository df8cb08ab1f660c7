"""Use case for deck operations."""

from uuid import UUID

import structlog

from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.use_cases.dtos.deck_dtos import DeckPage, DeckWithCount
from flashdeck.domain.common.value_objects.ids import DeckId, UserId
from flashdeck.domain.learning.entities.deck import Deck
from flashdeck.exceptions import DeckNotFoundError, ValidationError

logger = structlog.get_logger(__name__)

MAX_PAGE_SIZE = 100


class DeckUseCase:
    """Use case for creating and browsing decks."""

    def __init__(self, deck_repository: DeckRepositoryProtocol) -> None:
        """Initialize use case with repository protocols."""
        self.deck_repository = deck_repository

    def create_deck(self, user_id: UUID, name: str) -> Deck:
        """
        Create a new deck for a user.

        Args:
            user_id: ID of the owner
            name: Deck name (1..100 characters after stripping)

        Returns:
            Created deck domain entity
        """
        deck = self.deck_repository.save(Deck.create(user_id=UserId(user_id), name=name))
        logger.info("created_deck", deck_id=str(deck.id))
        return deck

    def get_deck(self, deck_id: UUID, user_id: UUID) -> Deck:
        """
        Get a deck owned by the user.

        Raises:
            DeckNotFoundError: If the deck does not exist or belongs to someone else
        """
        deck = self.deck_repository.find_by_id(DeckId(deck_id), UserId(user_id))
        if not deck:
            raise DeckNotFoundError(deck_id)
        return deck

    def list_decks(self, user_id: UUID, page: int = 1, limit: int = 20) -> DeckPage:
        """
        List the user's decks, newest first, with flashcard counts.

        Args:
            user_id: ID of the owner
            page: 1-based page number
            limit: Page size (1..100)

        Returns:
            The requested page and the total number of decks
        """
        if page < 1:
            raise ValidationError("Page must be at least 1")
        if not 1 <= limit <= MAX_PAGE_SIZE:
            raise ValidationError(f"Limit must be between 1 and {MAX_PAGE_SIZE}")

        user_id_vo = UserId(user_id)
        total = self.deck_repository.count_by_user(user_id_vo)
        rows = self.deck_repository.find_page_with_counts(
            user_id_vo, offset=(page - 1) * limit, limit=limit
        )
        items = [DeckWithCount(deck=deck, flashcard_count=count) for deck, count in rows]
        return DeckPage(items=items, page=page, limit=limit, total=total)

    def rename_deck(self, deck_id: UUID, user_id: UUID, name: str) -> Deck:
        """
        Rename a deck owned by the user.

        Raises:
            DeckNotFoundError: If the deck does not exist or belongs to someone else
            ValidationError: If the new name is empty or too long
        """
        deck = self.get_deck(deck_id, user_id)
        deck.rename(name)
        deck = self.deck_repository.save(deck)
        logger.info("renamed_deck", deck_id=str(deck_id))
        return deck

    def delete_deck(self, deck_id: UUID, user_id: UUID) -> None:
        """
        Delete a deck with all of its flashcards and generations.

        Raises:
            DeckNotFoundError: If the deck does not exist or belongs to someone else
        """
        if not self.deck_repository.delete(DeckId(deck_id), UserId(user_id)):
            raise DeckNotFoundError(deck_id)
        logger.info("deleted_deck", deck_id=str(deck_id))
