"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")

import hashlib
from collections.abc import Generator
from typing import Any
from uuid import UUID, uuid4

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from flashdeck import models
from flashdeck.config import get_settings
from flashdeck.core import container
from flashdeck.database import Base, get_db
from flashdeck.infrastructure.rate_limiting import RateLimitConfig, RateLimiter
from flashdeck.main import app

# Test database URL (in-memory SQLite shared across threads)
TEST_DATABASE_URL = "sqlite://"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

OTHER_USER_ID = UUID("00000000-0000-4000-8000-000000000002")


class FakeGenerationClient:
    """Stands in for the model provider; answers with ``response`` or raises ``error``."""

    default_model = "test/flashcard-model"

    def __init__(self) -> None:
        self.response: Any = sample_model_response(5)
        self.error: Exception | None = None
        self.calls: list[dict[str, Any]] = []

    async def generate_json(self, **kwargs: Any) -> Any:
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


def sample_model_response(count: int) -> dict[str, Any]:
    return {
        "flashcards": [
            {"front": f"Question {i}?", "back": f"Answer {i}."} for i in range(1, count + 1)
        ]
    }


def sample_source_text(length: int = 1500) -> str:
    sentence = "Photosynthesis converts light energy into chemical energy. "
    return (sentence * (length // len(sentence) + 1))[:length]


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def generation_client() -> FakeGenerationClient:
    return FakeGenerationClient()


@pytest.fixture
def ai_rate_limiter() -> RateLimiter:
    settings = get_settings()
    return RateLimiter(
        RateLimitConfig(
            max_requests=settings.AI_RATE_LIMIT_MAX_REQUESTS,
            window_seconds=settings.AI_RATE_LIMIT_WINDOW_SECONDS,
        )
    )


@pytest.fixture
def api_rate_limiter() -> RateLimiter:
    settings = get_settings()
    return RateLimiter(
        RateLimitConfig(
            max_requests=settings.API_RATE_LIMIT_MAX_REQUESTS,
            window_seconds=settings.API_RATE_LIMIT_WINDOW_SECONDS,
        )
    )


@pytest.fixture
def ai_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    """Configure a provider key so AI endpoints are served."""
    monkeypatch.setattr(get_settings(), "OPENROUTER_API_KEY", "test-openrouter-key")


@pytest.fixture
def client(
    db_session: Session,
    generation_client: FakeGenerationClient,
    ai_rate_limiter: RateLimiter,
    api_rate_limiter: RateLimiter,
) -> Generator[TestClient, Any, None]:
    """Create a test client with database session and fresh process-wide services."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    container.generation_client.override(providers.Object(generation_client))
    container.ai_rate_limiter.override(providers.Object(ai_rate_limiter))
    container.api_rate_limiter.override(providers.Object(api_rate_limiter))

    with TestClient(app) as test_client:
        yield test_client

    container.generation_client.reset_override()
    container.ai_rate_limiter.reset_override()
    container.api_rate_limiter.reset_override()
    app.dependency_overrides.clear()


@pytest.fixture
def user_id() -> UUID:
    return get_settings().DEFAULT_USER_ID


@pytest.fixture
def test_deck(db_session: Session, user_id: UUID) -> models.Deck:
    """Create a deck owned by the default user."""
    deck = models.Deck(id=uuid4(), user_id=user_id, name="Biology")
    db_session.add(deck)
    db_session.commit()
    db_session.refresh(deck)
    return deck


@pytest.fixture
def other_user_deck(db_session: Session) -> models.Deck:
    """Create a deck that belongs to someone else."""
    deck = models.Deck(id=uuid4(), user_id=OTHER_USER_ID, name="Not yours")
    db_session.add(deck)
    db_session.commit()
    db_session.refresh(deck)
    return deck


@pytest.fixture
def test_generation(
    db_session: Session, test_deck: models.Deck, user_id: UUID
) -> models.Generation:
    """Create a completed generation for ``test_deck``."""
    source = sample_source_text()
    generation = models.Generation(
        id=uuid4(),
        user_id=user_id,
        deck_id=test_deck.id,
        model="test/flashcard-model",
        generated_count=5,
        source_text_hash=hashlib.sha256(source.encode("utf-8")).hexdigest(),
        source_text_length=len(source),
        generation_duration=1200,
    )
    db_session.add(generation)
    db_session.commit()
    db_session.refresh(generation)
    return generation
