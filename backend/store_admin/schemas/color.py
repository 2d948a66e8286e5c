"""Color schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from store_admin.schemas.common import CamelModel


class ColorCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    value: str = Field(..., min_length=4, max_length=50, pattern=r"^#")


class ColorUpdate(ColorCreate):
    pass


class ColorResponse(CamelModel):
    id: UUID
    store_id: UUID
    name: str
    value: str
    created_at: datetime
    updated_at: datetime


class ColorRow(CamelModel):
    id: UUID
    store_id: UUID
    name: str
    value: str
    created_at: str
