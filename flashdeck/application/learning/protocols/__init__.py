from .deck_repository import DeckRepositoryProtocol
from .flashcard_repository import FlashcardRepositoryProtocol
from .generation_repository import GenerationRepositoryProtocol
from .structured_generation_client import StructuredGenerationClientProtocol

__all__ = [
    "DeckRepositoryProtocol",
    "FlashcardRepositoryProtocol",
    "GenerationRepositoryProtocol",
    "StructuredGenerationClientProtocol",
]
