"""DTOs for AI generation use cases."""

from dataclasses import dataclass

from flashdeck.constants import AIFlashcardSource
from flashdeck.domain.common.value_objects.ids import GenerationId


@dataclass(frozen=True)
class GeneratedCandidate:
    """Front/back pair proposed by the model."""

    front: str
    back: str


@dataclass
class CandidateGenerationResult:
    generation_id: GenerationId
    candidates: list[GeneratedCandidate]


@dataclass(frozen=True)
class BatchFlashcardInput:
    """A reviewed candidate the user decided to keep."""

    front: str
    back: str
    source: AIFlashcardSource


@dataclass
class BatchCreationResult:
    created_count: int
    generation_id: GenerationId
