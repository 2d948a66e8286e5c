"""Billboard CRUD endpoints. Reads are open; writes require the store owner."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.api.common import (
    ListingParams, commit_or_fail, delete_in_store, get_for_update, get_in_store, list_or_fail,
)
from store_admin.core.deps import StoreContext, require_store_owner
from store_admin.db.base import get_db
from store_admin.models.billboard import Billboard
from store_admin.schemas.billboard import (
    BillboardCreate,
    BillboardUpdate,
    BillboardResponse,
    BillboardRow,
)
from store_admin.schemas.common import DeleteResult, Page
from store_admin.services.query_builder import ResourceKind, build_query

router = APIRouter(prefix="/{store_id}/billboards", tags=["billboards"])


@router.get("", response_model=Page[BillboardRow])
async def list_billboards(
    store_id: UUID,
    params: ListingParams = Depends(),
    db: AsyncSession = Depends(get_db),
):
    query = build_query(
        ResourceKind.BILLBOARD, store_id, params.page_index, params.page_size, params.search_term
    )
    return await list_or_fail(db, query, "BILLBOARD_GET")


@router.get("/{billboard_id}", response_model=BillboardResponse | None)
async def get_billboard(
    store_id: UUID,
    billboard_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    billboard = await get_in_store(db, Billboard, billboard_id, store_id)
    return BillboardResponse.model_validate(billboard) if billboard else None


@router.post("", response_model=BillboardResponse)
async def create_billboard(
    body: BillboardCreate,
    ctx: StoreContext = Depends(require_store_owner),
    db: AsyncSession = Depends(get_db),
):
    billboard = Billboard(**body.model_dump(), store_id=ctx.store_id)
    db.add(billboard)
    await commit_or_fail(db, "BILLBOARD_POST")
    return BillboardResponse.model_validate(billboard)


@router.patch("/{billboard_id}", response_model=BillboardResponse)
async def update_billboard(
    billboard_id: UUID,
    body: BillboardUpdate,
    ctx: StoreContext = Depends(require_store_owner),
    db: AsyncSession = Depends(get_db),
):
    billboard = await get_for_update(db, Billboard, billboard_id, ctx.store_id, "BILLBOARD_PATCH")
    for field, value in body.model_dump().items():
        setattr(billboard, field, value)
    await commit_or_fail(db, "BILLBOARD_PATCH")
    return BillboardResponse.model_validate(billboard)


@router.delete("/{billboard_id}", response_model=DeleteResult)
async def delete_billboard(
    billboard_id: UUID,
    ctx: StoreContext = Depends(require_store_owner),
    db: AsyncSession = Depends(get_db),
):
    """Delete a billboard; refused while a category still shows it."""
    return await delete_in_store(db, Billboard, billboard_id, ctx.store_id, "BILLBOARD_DELETE")
