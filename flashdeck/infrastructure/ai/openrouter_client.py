"""OpenRouter chat completions client for schema-constrained JSON output."""

import json
from typing import Any

import httpx
import structlog

from flashdeck.exceptions import (
    AIAuthenticationError,
    AIBadRequestError,
    AINetworkError,
    AIParsingError,
    AIRateLimitError,
    AIServerError,
    AIServiceError,
)

logger = structlog.get_logger(__name__)

SCHEMA_NAME = "custom_json_schema"


class OpenRouterClient:
    """
    Calls an OpenAI-compatible ``/chat/completions`` endpoint and parses the
    message content as JSON.

    Every failure is raised as one ``AIServiceError`` subclass so callers can
    tell authentication, throttling, bad requests, server and network
    problems and unparseable answers apart. Nothing is retried here.
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = "https://openrouter.ai/api/v1",
        default_model: str = "openai/gpt-4o-mini",
        timeout: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self._default_model = default_model
        self.timeout = timeout
        self._transport = transport

    @property
    def default_model(self) -> str:
        return self._default_model

    async def generate_json(
        self,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, Any],
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> Any:
        """
        Run a completion constrained to ``json_schema`` and return the parsed content.

        Raises:
            AIAuthenticationError: Provider answered 401
            AIRateLimitError: Provider answered 429
            AIBadRequestError: Provider answered 400
            AIServerError: 5xx or any other unexpected status
            AINetworkError: The request never got an answer
            AIParsingError: The answer has no JSON content
        """
        payload = self.build_payload(
            system_prompt, user_prompt, json_schema, model, temperature, max_tokens
        )
        body = await self._send(payload)
        return self._parse_content(body)

    def build_payload(
        self,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, Any],
        model: str | None = None,
        temperature: float | None = None,
        max_tokens: int | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": model or self._default_model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "response_format": {
                "type": "json_schema",
                "json_schema": {"name": SCHEMA_NAME, "strict": True, "schema": json_schema},
            },
        }
        # Optional parameters only when set
        if temperature is not None:
            payload["temperature"] = temperature
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens
        return payload

    async def _send(self, payload: dict[str, Any]) -> Any:
        if not self.api_key:
            raise AIAuthenticationError("OpenRouter API key is not configured")

        headers = {"Authorization": f"Bearer {self.api_key}"}
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self.timeout, transport=self._transport
            ) as client:
                response = await client.post("/chat/completions", json=payload, headers=headers)
        except httpx.HTTPError as e:
            logger.warning("ai_request_transport_error", error_type=type(e).__name__)
            raise AINetworkError(f"Network error: {e}") from e

        if response.is_success:
            try:
                return response.json()
            except ValueError as e:
                raise AIParsingError("Provider returned a non-JSON response body") from e

        raise self._error_for(response)

    @staticmethod
    def _error_for(response: httpx.Response) -> AIServiceError:
        status_code = response.status_code
        logger.warning("ai_request_failed", status_code=status_code)

        if status_code == 401:
            return AIAuthenticationError(
                "Authentication failed. Please check your OPENROUTER_API_KEY."
            )
        if status_code == 429:
            return AIRateLimitError("Rate limit exceeded. Please wait before making more requests.")
        if status_code == 400:
            detail = _provider_error_message(response)
            if detail:
                return AIBadRequestError(f"Bad request: {detail}")
            return AIBadRequestError("Bad request. Invalid parameters.")
        if status_code >= 500:
            return AIServerError(
                f"OpenRouter server error ({status_code}). Please try again later."
            )
        return AIServerError(f"Request failed with status {status_code}. Please try again.")

    @staticmethod
    def _parse_content(body: Any) -> Any:
        content = None
        if isinstance(body, dict):
            choices = body.get("choices")
            if isinstance(choices, list) and choices and isinstance(choices[0], dict):
                message = choices[0].get("message")
                if isinstance(message, dict):
                    content = message.get("content")

        if not isinstance(content, str):
            raise AIParsingError("Invalid response structure from API. Missing message content.")

        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            logger.warning("ai_response_not_json", content_length=len(content))
            raise AIParsingError(f"Failed to parse the model's response as JSON: {e.msg}") from e


def _provider_error_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    error = body.get("error")
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    return None
