"""Order read endpoints. Orders are only created by the payment webhook."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.api.common import ListingParams, get_in_store, list_or_fail
from store_admin.db.base import get_db
from store_admin.models.order import Order
from store_admin.schemas.common import Page
from store_admin.schemas.order import OrderResponse, OrderRow
from store_admin.services.query_builder import ResourceKind, build_query

router = APIRouter(prefix="/{store_id}/orders", tags=["orders"])


@router.get("", response_model=Page[OrderRow])
async def list_orders(
    store_id: UUID,
    params: ListingParams = Depends(),
    db: AsyncSession = Depends(get_db),
):
    """List orders with product names and the current total price."""
    query = build_query(
        ResourceKind.ORDER, store_id, params.page_index, params.page_size, params.search_term
    )
    return await list_or_fail(db, query, "ORDER_GET")


@router.get("/{order_id}", response_model=OrderResponse | None)
async def get_order(
    store_id: UUID,
    order_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    order = await get_in_store(db, Order, order_id, store_id)
    return OrderResponse.model_validate(order) if order else None
