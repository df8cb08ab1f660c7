"""FastAPI dependencies for the application."""

import random
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

import structlog
from dependency_injector.providers import Provider

from flashdeck.config import get_settings
from flashdeck.core import container
from flashdeck.exceptions import RateLimitExceededError, ServiceUnavailableError
from flashdeck.feature_flags import is_ai_enabled
from flashdeck.infrastructure.identity.dependencies import CurrentUserId
from flashdeck.infrastructure.rate_limiting import RateLimiter

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def require_ai_enabled(func: F) -> F:
    """
    Decorator that requires AI to be enabled for the endpoint.

    Raises ServiceUnavailableError (HTTP 503) when no model provider is configured.

    Usage:
        @router.post("/endpoint")
        @require_ai_enabled
        async def my_endpoint():
            ...
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:  # noqa: ANN401
        if not is_ai_enabled():
            raise ServiceUnavailableError("AI features are not enabled on this server")
        return await func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def _maybe_cleanup(limiter: RateLimiter) -> None:
    # No background timer: sweep stale keys on a small share of requests
    if random.random() < get_settings().RATE_LIMIT_CLEANUP_PROBABILITY:
        limiter.cleanup()


def rate_limit(provider: Provider[RateLimiter]) -> Callable[[CurrentUserId], None]:
    """
    Create a FastAPI dependency that enforces a rate limiter per user.

    Dependencies run before the request body is validated, so an exhausted
    quota is reported even for malformed requests.
    """

    def dependency(user_id: CurrentUserId) -> None:
        limiter = provider()
        _maybe_cleanup(limiter)

        key = str(user_id)
        if limiter.is_rate_limited(key):
            remaining = limiter.get_remaining_requests(key)
            logger.info("rate_limit_exceeded", user_id=key, remaining=remaining)
            raise RateLimitExceededError(remaining)

    return dependency


ai_rate_limit = rate_limit(container.ai_rate_limiter)
api_rate_limit = rate_limit(container.api_rate_limiter)
