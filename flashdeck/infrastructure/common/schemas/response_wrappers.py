"""Common schemas shared by API responses."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Base for API bodies: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DataResponse(CamelModel, Generic[T]):
    """Generic list wrapper."""

    data: list[T]


class Pagination(CamelModel):
    current_page: int
    total_pages: int
    total_items: int

