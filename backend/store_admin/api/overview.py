"""Dashboard numbers: monthly revenue series and the overview cards."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.deps import StoreContext, require_store_owner
from store_admin.db.base import get_db
from store_admin.schemas.revenue import GraphData, StoreOverview
from store_admin.services.revenue import monthly_revenue, store_overview

router = APIRouter(prefix="/{store_id}", tags=["dashboard"])


@router.get("/revenue", response_model=list[GraphData])
async def get_monthly_revenue(store_id: UUID, db: AsyncSession = Depends(get_db)):
    """Paid revenue per month of the current year, always twelve entries."""
    return await monthly_revenue(db, store_id)


@router.get("/overview", response_model=StoreOverview)
async def get_overview(
    ctx: StoreContext = Depends(require_store_owner),
    db: AsyncSession = Depends(get_db),
):
    return await store_overview(db, ctx.store_id)
