"""Common value objects shared across all domain modules."""

from .content_hash import ContentHash
from .ids import DeckId, FlashcardId, GenerationId, UserId

__all__ = [
    "ContentHash",
    # IDs
    "DeckId",
    "FlashcardId",
    "GenerationId",
    "UserId",
]
