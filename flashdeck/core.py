from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from flashdeck.application.learning.use_cases.decks.deck_use_case import DeckUseCase
from flashdeck.application.learning.use_cases.flashcards.create_flashcard_use_case import (
    CreateFlashcardUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.delete_flashcard_use_case import (
    DeleteFlashcardUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.get_flashcards_by_deck_use_case import (
    GetFlashcardsByDeckUseCase,
)
from flashdeck.application.learning.use_cases.flashcards.update_flashcard_use_case import (
    UpdateFlashcardUseCase,
)
from flashdeck.application.learning.use_cases.generation import (
    CreateFlashcardsFromGenerationUseCase,
    GenerateFlashcardCandidatesUseCase,
)
from flashdeck.config import get_settings
from flashdeck.infrastructure.ai.openrouter_client import OpenRouterClient
from flashdeck.infrastructure.learning.repositories import (
    DeckRepository,
    FlashcardRepository,
    GenerationRepository,
)
from flashdeck.infrastructure.rate_limiting import RateLimitConfig, RateLimiter

settings = get_settings()


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    deck_repository = providers.Factory(DeckRepository, db=db)
    flashcard_repository = providers.Factory(FlashcardRepository, db=db)
    generation_repository = providers.Factory(GenerationRepository, db=db)

    # Process-wide services
    ai_rate_limiter = providers.Singleton(
        RateLimiter,
        config=providers.Factory(
            RateLimitConfig,
            max_requests=settings.AI_RATE_LIMIT_MAX_REQUESTS,
            window_seconds=settings.AI_RATE_LIMIT_WINDOW_SECONDS,
        ),
    )
    api_rate_limiter = providers.Singleton(
        RateLimiter,
        config=providers.Factory(
            RateLimitConfig,
            max_requests=settings.API_RATE_LIMIT_MAX_REQUESTS,
            window_seconds=settings.API_RATE_LIMIT_WINDOW_SECONDS,
        ),
    )
    generation_client = providers.Singleton(
        OpenRouterClient,
        api_key=settings.OPENROUTER_API_KEY,
        base_url=settings.OPENROUTER_BASE_URL,
        default_model=settings.AI_MODEL_NAME,
        timeout=settings.AI_REQUEST_TIMEOUT,
    )

    # Learning module, application use cases
    deck_use_case = providers.Factory(DeckUseCase, deck_repository=deck_repository)

    create_flashcard_use_case = providers.Factory(
        CreateFlashcardUseCase,
        flashcard_repository=flashcard_repository,
        deck_repository=deck_repository,
    )
    get_flashcards_by_deck_use_case = providers.Factory(
        GetFlashcardsByDeckUseCase,
        flashcard_repository=flashcard_repository,
        deck_repository=deck_repository,
    )
    update_flashcard_use_case = providers.Factory(
        UpdateFlashcardUseCase,
        flashcard_repository=flashcard_repository,
    )
    delete_flashcard_use_case = providers.Factory(
        DeleteFlashcardUseCase,
        flashcard_repository=flashcard_repository,
    )

    generate_flashcard_candidates_use_case = providers.Factory(
        GenerateFlashcardCandidatesUseCase,
        deck_repository=deck_repository,
        generation_repository=generation_repository,
        generation_client=generation_client,
        model=settings.AI_MODEL_NAME,
        temperature=settings.AI_TEMPERATURE,
        max_tokens=settings.AI_MAX_TOKENS,
    )
    create_flashcards_from_generation_use_case = providers.Factory(
        CreateFlashcardsFromGenerationUseCase,
        deck_repository=deck_repository,
        flashcard_repository=flashcard_repository,
        generation_repository=generation_repository,
    )


container = Container()
