"""Custom exception hierarchy for flashdeck application."""

from starlette import status


class FlashdeckError(Exception):
    """Base exception for all flashdeck errors."""

    error: str = "Internal server error"

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        *,
        headers: dict[str, str] | None = None,
        extra: dict[str, object] | None = None,
    ) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        self.headers = headers or {}
        self.extra = extra or {}
        super().__init__(self.message)

    @property
    def public_message(self) -> str:
        """Message safe to show to API clients."""
        return self.message


class NotFoundError(FlashdeckError):
    """Resource not found error."""

    error = "Not found"

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND)


class DeckNotFoundError(NotFoundError):
    """Deck not found or owned by another user."""

    def __init__(self, deck_id: object | None = None) -> None:
        self.deck_id = deck_id
        if deck_id is not None:
            super().__init__(f"Deck with id {deck_id} not found")
        else:
            super().__init__("Deck not found")


class GenerationNotFoundError(NotFoundError):
    """Generation not found, or not owned by the user and deck."""

    def __init__(self, generation_id: object | None = None) -> None:
        self.generation_id = generation_id
        if generation_id is not None:
            super().__init__(f"Generation with id {generation_id} not found")
        else:
            super().__init__("Generation not found")


class ValidationError(FlashdeckError):
    """Validation error."""

    error = "Invalid request"

    def __init__(self, message: str, status_code: int = status.HTTP_400_BAD_REQUEST) -> None:
        super().__init__(message, status_code=status_code)


class ServiceUnavailableError(FlashdeckError):
    """A required feature or upstream is not available."""

    error = "Service unavailable"

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=status.HTTP_503_SERVICE_UNAVAILABLE)


class RateLimitExceededError(FlashdeckError):
    """Caller exhausted its request quota for this endpoint."""

    error = "Too many requests"

    def __init__(self, remaining: int) -> None:
        self.remaining = remaining
        super().__init__(
            "Rate limit exceeded. Please try again later.",
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            headers={"X-RateLimit-Remaining": str(remaining)},
            extra={"remaining": remaining},
        )


# --- AI service taxonomy ---
#
# Raised by the structured generation client. The HTTP status, title and
# public message are what the generation endpoint answers with; ``message``
# keeps the provider-facing detail for logs.


class AIServiceError(FlashdeckError):
    """Base exception for failures talking to the language model provider."""

    error = "AI service error"
    http_status: int = status.HTTP_503_SERVICE_UNAVAILABLE
    default_public_message = "AI service is temporarily unavailable. Please try again later."
    retry_after: int | None = None

    def __init__(self, message: str) -> None:
        headers = {"Retry-After": str(self.retry_after)} if self.retry_after else None
        super().__init__(message, status_code=self.http_status, headers=headers)

    @property
    def public_message(self) -> str:
        return self.default_public_message


class AIAuthenticationError(AIServiceError):
    """Provider rejected our credentials (HTTP 401)."""

    error = "Authentication error"
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_public_message = "Failed to authenticate with AI service. Please contact support."


class AIRateLimitError(AIServiceError):
    """Provider-side throttling (HTTP 429)."""

    error = "AI service rate limit"
    http_status = status.HTTP_503_SERVICE_UNAVAILABLE
    default_public_message = "AI service rate limit exceeded. Please try again in a few moments."
    retry_after = 60


class AIBadRequestError(AIServiceError):
    """Malformed call to the provider (HTTP 400)."""

    error = "Invalid AI request"
    http_status = status.HTTP_422_UNPROCESSABLE_CONTENT
    default_public_message = (
        "Failed to process the request. The text format may be incompatible."
    )


class AIServerError(AIServiceError):
    """Provider 5xx or an unrecognised status."""

    error = "AI service error"
    http_status = status.HTTP_503_SERVICE_UNAVAILABLE
    default_public_message = "AI service is temporarily unavailable. Please try again later."


class AINetworkError(AIServiceError):
    """Transport-level failure reaching the provider."""

    error = "Network error"
    http_status = status.HTTP_503_SERVICE_UNAVAILABLE
    default_public_message = (
        "Unable to reach AI service. Please check your connection and try again."
    )


class AIParsingError(AIServiceError):
    """Provider answered but the payload is not the JSON we asked for."""

    error = "AI response error"
    http_status = status.HTTP_502_BAD_GATEWAY
    default_public_message = "AI service returned an invalid response. Please try again."


class CandidateGenerationError(FlashdeckError):
    """
    Single failure surfaced by the generation orchestration.

    Wraps whatever went wrong (model call, shape validation, persistence).
    When the cause belongs to the AI taxonomy, the response mirrors it.
    """

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        message = f"Failed to generate flashcard candidates: {cause}"
        if isinstance(cause, FlashdeckError):
            super().__init__(message, status_code=cause.status_code, headers=cause.headers)
            self.error = cause.error
        else:
            super().__init__(message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    @property
    def public_message(self) -> str:
        if isinstance(self.cause, FlashdeckError):
            return self.cause.public_message
        return "Failed to generate flashcard candidates. Please try again later."
