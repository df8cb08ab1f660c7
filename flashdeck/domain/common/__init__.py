"""
Domain common module.

Contains base classes for domain modeling:
- ValueObject: Immutable objects defined by their attributes
- Entity: Objects with identity and lifecycle
"""

from .entity import Entity, EntityId
from .exceptions import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
    InvalidTransitionError,
    ValidationError,
)
from .value_object import ValueObject

__all__ = [
    "BusinessRuleViolationError",
    "DomainError",
    "Entity",
    "EntityId",
    "EntityNotFoundError",
    "InvalidTransitionError",
    "ValidationError",
    "ValueObject",
]
