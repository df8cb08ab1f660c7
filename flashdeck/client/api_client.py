"""HTTP client for the flashdeck generation endpoints."""

import logging
from typing import Any
from uuid import UUID

import httpx

from flashdeck.domain.learning.workflow import CandidateDraft

logger = logging.getLogger(__name__)


class FlashdeckApiError(Exception):
    """The API answered with an error or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class FlashdeckApiClient:
    """HTTP client for the flashdeck REST API.

    Only covers what the generation review workflow needs: requesting
    candidates and committing the accepted ones.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 90.0,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout, headers=headers, transport=transport
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "FlashdeckApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise FlashdeckApiError(f"Could not reach the server: {e}") from e

        if response.is_error:
            raise FlashdeckApiError(_error_message(response), status_code=response.status_code)
        try:
            return response.json()
        except ValueError as e:
            raise FlashdeckApiError(
                "The server returned an unreadable response", status_code=response.status_code
            ) from e

    async def generate_flashcards(
        self, source_text: str, deck_id: UUID | str
    ) -> tuple[str, list[CandidateDraft]]:
        """Ask the server for flashcard candidates. Returns the generation id and the drafts."""
        data = await self._request(
            "POST",
            "/api/ai/generate-flashcards",
            json={"sourceText": source_text, "deckId": str(deck_id)},
        )
        try:
            generation_id = str(data["generationId"])
            drafts = [
                CandidateDraft(front=str(c["front"]), back=str(c["back"]))
                for c in data["candidates"]
            ]
        except (KeyError, TypeError) as e:
            raise FlashdeckApiError(f"Unexpected generation response: {e!r}") from e
        logger.info("Received %d flashcard candidates", len(drafts))
        return generation_id, drafts

    async def create_flashcards_batch(
        self, deck_id: UUID | str, generation_id: str, flashcards: list[dict[str, str]]
    ) -> int:
        """Commit accepted candidates to a deck. Returns the number of created flashcards."""
        data = await self._request(
            "POST",
            f"/api/decks/{deck_id}/flashcards/batch",
            json={"generationId": generation_id, "flashcards": flashcards},
        )
        try:
            return int(data["createdCount"])
        except (KeyError, TypeError, ValueError) as e:
            raise FlashdeckApiError(f"Unexpected batch response: {e!r}") from e


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return f"HTTP error! status: {response.status_code}"
