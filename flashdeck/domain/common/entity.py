"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    @dataclass
    class Deck(Entity[DeckId]):
        id: DeckId
        name: str

        def rename(self, name: str) -> None:
            self.name = name
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import UUID, uuid4

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Identifiers wrap a UUID. Distinct subclasses keep a deck id from being
    passed where a generation id is expected.
    """

    value: UUID

    def __post_init__(self) -> None:
        if not isinstance(self.value, UUID):
            raise TypeError(f"{self.__class__.__name__} must wrap a UUID")

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def generate(cls) -> Self:
        """Create a fresh random identifier."""
        return cls(uuid4())

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return str(self.value)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Have lifecycle (created, modified, deleted)

    Subclasses must have an 'id' attribute of type IdType.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
