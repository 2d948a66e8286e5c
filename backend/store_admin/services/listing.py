"""Execute a listing query and shape rows for the dashboard tables."""

import logging
from decimal import Decimal
from typing import Any, Callable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.models import Billboard, Category, Color, Order, Product, Size
from store_admin.schemas.billboard import BillboardRow
from store_admin.schemas.category import CategoryRow
from store_admin.schemas.color import ColorRow
from store_admin.schemas.common import Page, format_date, format_price
from store_admin.schemas.order import OrderItemResponse, OrderRow
from store_admin.schemas.product import ProductRow
from store_admin.schemas.size import SizeRow
from store_admin.services.query_builder import ListingQuery, ResourceKind

logger = logging.getLogger(__name__)


def shape_billboard(billboard: Billboard) -> BillboardRow:
    return BillboardRow(
        id=billboard.id,
        store_id=billboard.store_id,
        label=billboard.label,
        image_url=billboard.image_url,
        created_at=format_date(billboard.created_at),
    )


def shape_category(category: Category) -> CategoryRow:
    return CategoryRow(
        id=category.id,
        store_id=category.store_id,
        billboard_id=category.billboard_id,
        name=category.name,
        billboard_label=category.billboard.label if category.billboard else "",
        created_at=format_date(category.created_at),
    )


def shape_color(color: Color) -> ColorRow:
    return ColorRow(
        id=color.id,
        store_id=color.store_id,
        name=color.name,
        value=color.value,
        created_at=format_date(color.created_at),
    )


def shape_size(size: Size) -> SizeRow:
    return SizeRow(
        id=size.id,
        store_id=size.store_id,
        name=size.name,
        value=size.value,
        created_at=format_date(size.created_at),
    )


def shape_product(product: Product) -> ProductRow:
    return ProductRow(
        id=product.id,
        store_id=product.store_id,
        category_id=product.category_id,
        color_id=product.color_id,
        size_id=product.size_id,
        name=product.name,
        price=product.price,
        is_featured=product.is_featured,
        is_archived=product.is_archived,
        created_at=format_date(product.created_at),
        updated_at=format_date(product.updated_at),
        images=product.images,
        category=product.category,
        color=product.color,
        size=product.size,
    )


def order_total(order: Order) -> Decimal:
    """Sum of the current prices of the order's products.

    Items whose product no longer exists count as zero.
    """
    return sum(
        (item.product.price for item in order.order_items if item.product is not None),
        Decimal("0"),
    )


def shape_order(order: Order) -> OrderRow:
    names = [item.product.name for item in order.order_items if item.product is not None]
    return OrderRow(
        id=order.id,
        store_id=order.store_id,
        is_paid=order.is_paid,
        phone=order.phone,
        address=order.address,
        products=", ".join(names),
        total_price=format_price(order_total(order)),
        created_at=format_date(order.created_at),
        order_items=[OrderItemResponse.model_validate(item) for item in order.order_items],
    )


SHAPERS: dict[ResourceKind, Callable[[Any], Any]] = {
    ResourceKind.BILLBOARD: shape_billboard,
    ResourceKind.CATEGORY: shape_category,
    ResourceKind.COLOR: shape_color,
    ResourceKind.SIZE: shape_size,
    ResourceKind.PRODUCT: shape_product,
    ResourceKind.ORDER: shape_order,
}


async def list_resource(db: AsyncSession, query: ListingQuery) -> Page:
    """Return one page of shaped rows plus the count of every matching row."""
    model = query.model

    stmt = (
        select(model)
        .where(*query.conditions)
        .order_by(*query.order_by)
        .offset(query.skip)
        .limit(query.take)
    )
    count_stmt = select(func.count()).select_from(model).where(*query.conditions)

    result = await db.execute(stmt)
    records = result.scalars().all()
    total = (await db.execute(count_stmt)).scalar_one()

    logger.debug(
        "Listed %s for store %s: %d of %d (skip=%d search=%r filters=%s)",
        query.kind.value, query.store_id, len(records), total, query.skip,
        query.search_term, query.filters,
    )
    shaper = SHAPERS[query.kind]
    return Page(data=[shaper(record) for record in records], total_records=total)
