from .deck_mapper import DeckMapper
from .flashcard_mapper import FlashcardMapper
from .generation_mapper import GenerationMapper

__all__ = ["DeckMapper", "FlashcardMapper", "GenerationMapper"]
