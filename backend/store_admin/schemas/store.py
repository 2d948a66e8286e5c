"""Store schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from store_admin.schemas.common import CamelModel


class StoreCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)


class StoreUpdate(StoreCreate):
    pass


class StoreResponse(CamelModel):
    id: UUID
    name: str
    user_id: str
    created_at: datetime
    updated_at: datetime
