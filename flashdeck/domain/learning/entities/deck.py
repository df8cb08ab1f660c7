"""
Deck entity: a named collection of flashcards owned by one user.
"""

from dataclasses import dataclass
from datetime import datetime

from flashdeck.constants import MAX_DECK_NAME_LENGTH
from flashdeck.domain.common.entity import Entity
from flashdeck.domain.common.exceptions import ValidationError
from flashdeck.domain.common.value_objects import DeckId, UserId


def _validate_name(name: str) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Deck name cannot be empty", field="name")
    if len(cleaned) > MAX_DECK_NAME_LENGTH:
        raise ValidationError(
            f"Deck name cannot exceed {MAX_DECK_NAME_LENGTH} characters", field="name"
        )
    return cleaned


@dataclass
class Deck(Entity[DeckId]):
    """
    Deck of flashcards.

    Business Rules:
    - Name cannot be empty and is at most 100 characters
    - A deck belongs to exactly one user
    """

    id: DeckId
    user_id: UserId
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        self.name = _validate_name(self.name)

    def is_owned_by(self, user_id: UserId) -> bool:
        return self.user_id == user_id

    def rename(self, name: str) -> None:
        """Rename the deck. The same name rules as on creation apply."""
        self.name = _validate_name(name)

    @classmethod
    def create(cls, user_id: UserId, name: str) -> "Deck":
        """Create a new deck with a fresh identifier."""
        return cls(id=DeckId.generate(), user_id=user_id, name=name)

    @classmethod
    def create_with_id(
        cls,
        id: DeckId,
        user_id: UserId,
        name: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Deck":
        """Reconstitute a deck from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            name=name,
            created_at=created_at,
            updated_at=updated_at,
        )
