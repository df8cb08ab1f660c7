from .create_flashcards_from_generation_use_case import CreateFlashcardsFromGenerationUseCase
from .generate_flashcard_candidates_use_case import GenerateFlashcardCandidatesUseCase

__all__ = ["CreateFlashcardsFromGenerationUseCase", "GenerateFlashcardCandidatesUseCase"]
