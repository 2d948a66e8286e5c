"""Billboard schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from store_admin.schemas.common import CamelModel


class BillboardCreate(CamelModel):
    label: str = Field(..., min_length=1, max_length=255)
    image_url: str = Field(..., min_length=1, max_length=1000)


class BillboardUpdate(BillboardCreate):
    pass


class BillboardResponse(CamelModel):
    id: UUID
    store_id: UUID
    label: str
    image_url: str
    created_at: datetime
    updated_at: datetime


class BillboardRow(CamelModel):
    """Billboard as shown in the listing table."""
    id: UUID
    store_id: UUID
    label: str
    image_url: str
    created_at: str
