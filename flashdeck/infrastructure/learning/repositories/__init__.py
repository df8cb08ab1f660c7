from .deck_repository import DeckRepository
from .flashcard_repository import FlashcardRepository
from .generation_repository import GenerationRepository

__all__ = ["DeckRepository", "FlashcardRepository", "GenerationRepository"]
