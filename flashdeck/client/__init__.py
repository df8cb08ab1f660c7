"""Python client for the flashdeck API and the generation review workflow."""

from .api_client import FlashdeckApiClient, FlashdeckApiError
from .workflow import GenerationWorkflow

__all__ = ["FlashdeckApiClient", "FlashdeckApiError", "GenerationWorkflow"]
