"""Feature flags module for centralized feature toggle management."""

from typing import Literal

from pydantic import BaseModel, Field

from flashdeck.config import get_settings


class FeatureFlags(BaseModel):
    """Pydantic model defining all feature flags in the application."""

    ai: bool = Field(..., description="Whether AI flashcard generation is enabled")


# Type alias for valid feature flag keys
FeatureFlagKey = Literal["ai"]


def get_feature_flags() -> FeatureFlags:
    """
    Get current feature flags based on application configuration.

    Returns:
        FeatureFlags instance with current flag values
    """
    settings = get_settings()
    return FeatureFlags(ai=settings.ai_enabled)


def get_feature_flag(key: FeatureFlagKey) -> bool:
    flags = get_feature_flags()
    return getattr(flags, key)


def is_ai_enabled() -> bool:
    """Check if AI features are enabled."""
    return get_feature_flag("ai")
