"""Product schemas for API request/response."""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import Field, field_validator

from store_admin.schemas.category import CategoryResponse
from store_admin.schemas.color import ColorResponse
from store_admin.schemas.common import CamelModel
from store_admin.schemas.size import SizeResponse


class ImageIn(CamelModel):
    url: str = Field(..., min_length=1, max_length=1000)


class ProductCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    images: list[ImageIn]
    price: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    category_id: UUID
    color_id: UUID
    size_id: UUID
    is_featured: bool = False
    is_archived: bool = False


class ProductUpdate(ProductCreate):
    pass


class ImageResponse(CamelModel):
    id: UUID
    product_id: UUID
    url: str
    created_at: datetime


class ProductResponse(CamelModel):
    id: UUID
    store_id: UUID
    category_id: UUID
    color_id: UUID
    size_id: UUID
    name: str
    price: float
    is_featured: bool
    is_archived: bool
    created_at: datetime
    updated_at: datetime
    images: list[ImageResponse] = []

    @field_validator("price", mode="before")
    @classmethod
    def _price_as_number(cls, value):
        return float(value) if isinstance(value, Decimal) else value


class ProductDetail(ProductResponse):
    category: CategoryResponse | None = None
    color: ColorResponse | None = None
    size: SizeResponse | None = None


class ProductRow(ProductDetail):
    """Product as shown in the listing table: plain price, date-only timestamp."""
    created_at: str
    updated_at: str
