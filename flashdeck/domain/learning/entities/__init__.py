from .deck import Deck
from .flashcard import Flashcard
from .generation import Generation

__all__ = ["Deck", "Flashcard", "Generation"]
