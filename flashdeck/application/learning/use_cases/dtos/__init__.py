from .deck_dtos import DeckPage, DeckWithCount
from .generation_dtos import (
    BatchCreationResult,
    BatchFlashcardInput,
    CandidateGenerationResult,
    GeneratedCandidate,
)

__all__ = [
    "BatchCreationResult",
    "BatchFlashcardInput",
    "CandidateGenerationResult",
    "DeckPage",
    "DeckWithCount",
    "GeneratedCandidate",
]
