"""Order schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from store_admin.schemas.common import CamelModel
from store_admin.schemas.product import ProductResponse


class OrderItemResponse(CamelModel):
    id: UUID
    order_id: UUID
    product_id: UUID


class OrderItemDetail(OrderItemResponse):
    product: ProductResponse | None = None


class OrderResponse(CamelModel):
    id: UUID
    store_id: UUID
    is_paid: bool
    phone: str
    address: str
    created_at: datetime
    updated_at: datetime
    order_items: list[OrderItemDetail] = []


class OrderRow(CamelModel):
    id: UUID
    store_id: UUID
    is_paid: bool
    phone: str
    address: str
    # Product names joined by ", "
    products: str
    # Sum of the products' current prices, formatted as dollars
    total_price: str
    created_at: str
    order_items: list[OrderItemResponse] = []
