from typing import Any, Protocol


class StructuredGenerationClientProtocol(Protocol):
    """Language model endpoint that answers with JSON matching a schema."""

    @property
    def default_model(self) -> str: ...

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
        Run a schema-constrained completion and return the parsed JSON.

        Raises:
            AIServiceError: One subclass per failure kind (authentication,
                rate limit, bad request, server, network, parsing)
        """
        ...
