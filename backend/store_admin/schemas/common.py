"""Shared schema plumbing: camelCase wire names, pages, delete results."""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Page(CamelModel, Generic[T]):
    data: list[T]
    total_records: int


class DeleteResult(CamelModel):
    count: int


def format_date(value: datetime) -> str:
    """Render a timestamp as ``YYYY-MM-DD``."""
    return value.date().isoformat()


def format_price(value: float) -> str:
    """Render an amount in US dollars, e.g. ``$1,234.50``."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"
