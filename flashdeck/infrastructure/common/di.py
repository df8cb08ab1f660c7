from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from flashdeck.core import container
from flashdeck.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency for a container provider.

    Binds the request-scoped database session to ``container.db`` while the
    use case and its repositories are built.
    """

    def dependency(db: DatabaseSession) -> T:
        try:
            container.db.override(db)
            return provider()
        finally:
            # Reset override after the object graph is built
            container.db.reset_override()

    return dependency
