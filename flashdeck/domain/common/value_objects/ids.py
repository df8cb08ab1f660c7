from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier (issued by the identity provider)."""


@dataclass(frozen=True)
class DeckId(EntityId):
    """Strongly-typed deck identifier."""


@dataclass(frozen=True)
class FlashcardId(EntityId):
    """Strongly-typed flashcard identifier."""


@dataclass(frozen=True)
class GenerationId(EntityId):
    """Strongly-typed generation identifier."""
