"""Revenue rollups for the dashboard."""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.models import Order, Product
from store_admin.schemas.revenue import GraphData, StoreOverview
from store_admin.services.listing import order_total

MONTH_NAMES = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def _year_bounds(now: datetime) -> tuple[datetime, datetime]:
    tz = now.tzinfo or timezone.utc
    return (
        datetime(now.year, 1, 1, tzinfo=tz),
        datetime(now.year + 1, 1, 1, tzinfo=tz),
    )


def bucket_by_month(orders) -> list[GraphData]:
    """Sum each order's value into the slot of its creation month.

    Always returns twelve entries, January first.
    """
    totals = [Decimal("0")] * 12
    for order in orders:
        totals[order.created_at.month - 1] += order_total(order)
    return [GraphData(name=name, total=float(total)) for name, total in zip(MONTH_NAMES, totals)]


async def monthly_revenue(
    db: AsyncSession, store_id: UUID, now: datetime | None = None
) -> list[GraphData]:
    """Paid revenue per month for the calendar year of ``now``."""
    start, end = _year_bounds(now or datetime.now(timezone.utc))
    result = await db.execute(
        select(Order).where(
            Order.store_id == store_id,
            Order.is_paid.is_(True),
            Order.created_at >= start,
            Order.created_at < end,
        )
    )
    return bucket_by_month(result.scalars().all())


async def total_revenue(db: AsyncSession, store_id: UUID) -> Decimal:
    result = await db.execute(
        select(Order).where(Order.store_id == store_id, Order.is_paid.is_(True))
    )
    return sum((order_total(order) for order in result.scalars().all()), Decimal("0"))


async def sales_count(db: AsyncSession, store_id: UUID) -> int:
    result = await db.execute(
        select(func.count(Order.id)).where(Order.store_id == store_id, Order.is_paid.is_(True))
    )
    return result.scalar_one()


async def stock_count(db: AsyncSession, store_id: UUID) -> int:
    result = await db.execute(
        select(func.count(Product.id)).where(
            Product.store_id == store_id, Product.is_archived.is_(False)
        )
    )
    return result.scalar_one()


async def store_overview(
    db: AsyncSession, store_id: UUID, now: datetime | None = None
) -> StoreOverview:
    return StoreOverview(
        total_revenue=float(await total_revenue(db, store_id)),
        sales_count=await sales_count(db, store_id),
        stock_count=await stock_count(db, store_id),
        graph_revenue=await monthly_revenue(db, store_id, now),
    )
