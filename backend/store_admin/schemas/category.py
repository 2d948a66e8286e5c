"""Category schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from store_admin.schemas.billboard import BillboardResponse
from store_admin.schemas.common import CamelModel


class CategoryCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    billboard_id: UUID


class CategoryUpdate(CategoryCreate):
    pass


class CategoryResponse(CamelModel):
    id: UUID
    store_id: UUID
    billboard_id: UUID
    name: str
    created_at: datetime
    updated_at: datetime


class CategoryDetail(CategoryResponse):
    billboard: BillboardResponse | None = None


class CategoryRow(CamelModel):
    id: UUID
    store_id: UUID
    billboard_id: UUID
    name: str
    billboard_label: str
    created_at: str
