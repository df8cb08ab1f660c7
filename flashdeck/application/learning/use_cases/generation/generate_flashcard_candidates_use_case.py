"""Use case for generating flashcard candidates from source text."""

import time
from uuid import UUID

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError

from flashdeck.application.learning.generation_prompts import (
    FLASHCARD_GENERATION_SCHEMA,
    MAX_GENERATED_FLASHCARDS,
    MIN_GENERATED_FLASHCARDS,
    SYSTEM_PROMPT,
    build_user_prompt,
)
from flashdeck.application.learning.protocols.deck_repository import DeckRepositoryProtocol
from flashdeck.application.learning.protocols.generation_repository import (
    GenerationRepositoryProtocol,
)
from flashdeck.application.learning.protocols.structured_generation_client import (
    StructuredGenerationClientProtocol,
)
from flashdeck.application.learning.use_cases.dtos.generation_dtos import (
    CandidateGenerationResult,
    GeneratedCandidate,
)
from flashdeck.domain.common.value_objects import ContentHash, DeckId, UserId
from flashdeck.domain.learning.entities.generation import Generation
from flashdeck.exceptions import AIParsingError, CandidateGenerationError, DeckNotFoundError

logger = structlog.get_logger(__name__)


class _GeneratedFlashcard(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid")

    front: str
    back: str


class _GeneratedFlashcards(BaseModel):
    model_config = ConfigDict(strict=True, extra="forbid")

    flashcards: list[_GeneratedFlashcard] = Field(
        min_length=MIN_GENERATED_FLASHCARDS, max_length=MAX_GENERATED_FLASHCARDS
    )


class GenerateFlashcardCandidatesUseCase:
    """Fingerprint source text, ask the model for flashcards and record the generation."""

    def __init__(
        self,
        deck_repository: DeckRepositoryProtocol,
        generation_repository: GenerationRepositoryProtocol,
        generation_client: StructuredGenerationClientProtocol,
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int = 2048,
    ) -> None:
        self.deck_repository = deck_repository
        self.generation_repository = generation_repository
        self.generation_client = generation_client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def generate_candidates(
        self, source_text: str, deck_id: UUID, user_id: UUID
    ) -> CandidateGenerationResult:
        """
        Generate flashcard candidates for a deck.

        The generation record is persisted only after the model answered with
        a well-formed payload, so a failed call leaves nothing behind.

        Args:
            source_text: Text to build flashcards from
            deck_id: Deck the candidates are meant for
            user_id: Caller, must own the deck

        Returns:
            The new generation id and the proposed front/back pairs

        Raises:
            DeckNotFoundError: If the deck does not exist or belongs to someone else
            CandidateGenerationError: Any failure after the ownership check,
                with the original exception available as ``cause``
        """
        deck_id_vo = DeckId(deck_id)
        user_id_vo = UserId(user_id)

        deck = self.deck_repository.find_by_id(deck_id_vo, user_id_vo)
        if not deck:
            raise DeckNotFoundError(deck_id)

        try:
            source_hash = ContentHash.compute(source_text)
            model = self.model or self.generation_client.default_model

            started = time.perf_counter()
            raw = await self.generation_client.generate_json(
                system_prompt=SYSTEM_PROMPT,
                user_prompt=build_user_prompt(source_text),
                json_schema=FLASHCARD_GENERATION_SCHEMA,
                model=model,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
            duration_ms = round((time.perf_counter() - started) * 1000)

            candidates = self._parse_candidates(raw)

            generation = self.generation_repository.save(
                Generation.create(
                    user_id=user_id_vo,
                    deck_id=deck_id_vo,
                    model=model,
                    generated_count=len(candidates),
                    source_text_hash=source_hash,
                    source_text_length=len(source_text),
                    generation_duration=duration_ms,
                )
            )
        except Exception as e:
            logger.warning(
                "flashcard_generation_failed",
                deck_id=str(deck_id),
                error_type=type(e).__name__,
                source_text_length=len(source_text),
            )
            raise CandidateGenerationError(e) from e

        logger.info(
            "flashcard_candidates_generated",
            generation_id=str(generation.id),
            deck_id=str(deck_id),
            model=model,
            candidate_count=len(candidates),
            source_hash=source_hash.short,
            duration_ms=duration_ms,
        )

        return CandidateGenerationResult(generation_id=generation.id, candidates=candidates)

    @staticmethod
    def _parse_candidates(raw: object) -> list[GeneratedCandidate]:
        try:
            parsed = _GeneratedFlashcards.model_validate(raw)
        except PydanticValidationError as e:
            raise AIParsingError(
                f"Model response does not match the flashcard schema ({e.error_count()} errors)"
            ) from e
        return [GeneratedCandidate(front=fc.front, back=fc.back) for fc in parsed.flashcards]
