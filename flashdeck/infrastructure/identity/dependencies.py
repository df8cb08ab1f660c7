"""FastAPI dependencies for caller identity."""

from typing import Annotated
from uuid import UUID

from fastapi import Depends

from flashdeck.config import Settings, get_settings


def get_current_user_id(settings: Annotated[Settings, Depends(get_settings)]) -> UUID:
    """
    Resolve the id of the user making the request.

    Authentication is handled by an external identity provider. Until its
    session is wired in, every request acts as the configured default user.
    """
    return settings.DEFAULT_USER_ID


CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]
