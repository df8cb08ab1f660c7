"""Tests for POST /ai/generate-flashcards."""

import hashlib
from uuid import UUID, uuid4

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from flashdeck import models
from flashdeck.config import get_settings
from flashdeck.exceptions import (
    AIAuthenticationError,
    AIBadRequestError,
    AINetworkError,
    AIParsingError,
    AIRateLimitError,
    AIServerError,
)
from tests.conftest import FakeGenerationClient, sample_model_response, sample_source_text

GENERATE_URL = "/api/ai/generate-flashcards"


@pytest.mark.usefixtures("ai_enabled")
class TestGenerateFlashcards:
    def test_generate_success(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        generation_client: FakeGenerationClient,
    ) -> None:
        source = sample_source_text(2000)

        response = client.post(
            GENERATE_URL, json={"sourceText": source, "deckId": str(test_deck.id)}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data["candidates"]) == 5
        assert data["candidates"][0] == {"front": "Question 1?", "back": "Answer 1."}

        generation = db_session.get(models.Generation, UUID(data["generationId"]))
        assert generation is not None
        assert generation.deck_id == test_deck.id
        assert generation.generated_count == 5
        assert generation.source_text_length == 2000
        assert generation.source_text_hash == hashlib.sha256(source.encode()).hexdigest()
        assert generation.model == get_settings().AI_MODEL_NAME
        assert generation.generation_duration >= 0
        assert generation.accepted_unedited_count is None
        assert generation.accepted_edited_count is None

    def test_generate_sends_schema_constrained_prompt(
        self,
        client: TestClient,
        test_deck: models.Deck,
        generation_client: FakeGenerationClient,
    ) -> None:
        source = sample_source_text()

        client.post(GENERATE_URL, json={"sourceText": source, "deckId": str(test_deck.id)})

        assert len(generation_client.calls) == 1
        call = generation_client.calls[0]
        assert source in call["user_prompt"]
        items = call["json_schema"]["properties"]["flashcards"]
        assert items["minItems"] == 3
        assert items["maxItems"] == 10

    @pytest.mark.parametrize("length", [1000, 10000])
    def test_generate_accepts_boundary_lengths(
        self, client: TestClient, test_deck: models.Deck, length: int
    ) -> None:
        response = client.post(
            GENERATE_URL,
            json={"sourceText": sample_source_text(length), "deckId": str(test_deck.id)},
        )

        assert response.status_code == status.HTTP_200_OK

    @pytest.mark.parametrize("length", [999, 10001])
    def test_generate_rejects_out_of_range_lengths(
        self,
        client: TestClient,
        test_deck: models.Deck,
        generation_client: FakeGenerationClient,
        length: int,
    ) -> None:
        response = client.post(
            GENERATE_URL,
            json={"sourceText": sample_source_text(length), "deckId": str(test_deck.id)},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["error"] == "Invalid request body"
        assert "sourceText" in data["details"]
        assert generation_client.calls == []

    def test_generate_missing_deck_id(self, client: TestClient) -> None:
        response = client.post(GENERATE_URL, json={"sourceText": sample_source_text()})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "deckId" in response.json()["details"]

    def test_generate_unknown_deck(
        self, client: TestClient, generation_client: FakeGenerationClient
    ) -> None:
        response = client.post(
            GENERATE_URL, json={"sourceText": sample_source_text(), "deckId": str(uuid4())}
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert generation_client.calls == []

    def test_generate_other_users_deck(
        self, client: TestClient, other_user_deck: models.Deck
    ) -> None:
        response = client.post(
            GENERATE_URL,
            json={"sourceText": sample_source_text(), "deckId": str(other_user_deck.id)},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    @pytest.mark.parametrize(
        ("error", "expected_status", "expected_message"),
        [
            (
                AIAuthenticationError("401 from provider"),
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Failed to authenticate with AI service. Please contact support.",
            ),
            (
                AIRateLimitError("429 from provider"),
                status.HTTP_503_SERVICE_UNAVAILABLE,
                "AI service rate limit exceeded. Please try again in a few moments.",
            ),
            (
                AIBadRequestError("Bad request: invalid schema"),
                status.HTTP_422_UNPROCESSABLE_CONTENT,
                "Failed to process the request. The text format may be incompatible.",
            ),
            (
                AIServerError("502 from provider"),
                status.HTTP_503_SERVICE_UNAVAILABLE,
                "AI service is temporarily unavailable. Please try again later.",
            ),
            (
                AINetworkError("connection reset"),
                status.HTTP_503_SERVICE_UNAVAILABLE,
                "Unable to reach AI service. Please check your connection and try again.",
            ),
            (
                AIParsingError("content is not JSON"),
                status.HTTP_502_BAD_GATEWAY,
                "AI service returned an invalid response. Please try again.",
            ),
        ],
    )
    def test_generate_maps_provider_failures(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        generation_client: FakeGenerationClient,
        error: Exception,
        expected_status: int,
        expected_message: str,
    ) -> None:
        generation_client.error = error

        response = client.post(
            GENERATE_URL,
            json={"sourceText": sample_source_text(), "deckId": str(test_deck.id)},
        )

        assert response.status_code == expected_status
        assert response.json()["message"] == expected_message
        # Provider detail never reaches the client
        assert str(error) not in response.text
        assert db_session.query(models.Generation).count() == 0

    def test_provider_rate_limit_sets_retry_after(
        self,
        client: TestClient,
        test_deck: models.Deck,
        generation_client: FakeGenerationClient,
    ) -> None:
        generation_client.error = AIRateLimitError("slow down")

        response = client.post(
            GENERATE_URL,
            json={"sourceText": sample_source_text(), "deckId": str(test_deck.id)},
        )

        assert response.headers["Retry-After"] == "60"

    @pytest.mark.parametrize(
        "payload",
        [
            sample_model_response(2),
            sample_model_response(11),
            {"flashcards": [{"front": "Q"}] * 3},
            {"cards": []},
            ["not", "an", "object"],
        ],
    )
    def test_generate_rejects_malformed_model_output(
        self,
        client: TestClient,
        db_session: Session,
        test_deck: models.Deck,
        generation_client: FakeGenerationClient,
        payload: object,
    ) -> None:
        generation_client.response = payload

        response = client.post(
            GENERATE_URL,
            json={"sourceText": sample_source_text(), "deckId": str(test_deck.id)},
        )

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert db_session.query(models.Generation).count() == 0

    def test_unexpected_failure_is_generic(
        self,
        client: TestClient,
        test_deck: models.Deck,
        generation_client: FakeGenerationClient,
    ) -> None:
        generation_client.error = RuntimeError("database exploded")

        response = client.post(
            GENERATE_URL,
            json={"sourceText": sample_source_text(), "deckId": str(test_deck.id)},
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "database exploded" not in response.text

    def test_ai_rate_limit(self, client: TestClient, test_deck: models.Deck) -> None:
        body = {"sourceText": sample_source_text(), "deckId": str(test_deck.id)}

        for _ in range(5):
            assert client.post(GENERATE_URL, json=body).status_code == status.HTTP_200_OK

        response = client.post(GENERATE_URL, json=body)

        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS
        data = response.json()
        assert data["error"] == "Too many requests"
        assert data["remaining"] == 0
        assert response.headers["X-RateLimit-Remaining"] == "0"

    def test_ai_rate_limit_checked_before_validation(
        self, client: TestClient, test_deck: models.Deck
    ) -> None:
        """Exhausted quota is reported even for bodies that would fail validation."""
        for _ in range(5):
            client.post(GENERATE_URL, json={"sourceText": "too short", "deckId": "x"})

        response = client.post(GENERATE_URL, json={"sourceText": "too short", "deckId": "x"})

        assert response.status_code == status.HTTP_429_TOO_MANY_REQUESTS

    def test_ai_quota_is_separate_from_api_quota(
        self, client: TestClient, test_deck: models.Deck
    ) -> None:
        body = {"sourceText": sample_source_text(), "deckId": str(test_deck.id)}
        for _ in range(5):
            client.post(GENERATE_URL, json=body)

        assert client.get("/api/decks").status_code == status.HTTP_200_OK


def test_generate_when_ai_disabled(
    client: TestClient,
    test_deck: models.Deck,
    generation_client: FakeGenerationClient,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(get_settings(), "OPENROUTER_API_KEY", None)

    response = client.post(
        GENERATE_URL, json={"sourceText": sample_source_text(), "deckId": str(test_deck.id)}
    )

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.json()["error"] == "Service unavailable"
    assert generation_client.calls == []
