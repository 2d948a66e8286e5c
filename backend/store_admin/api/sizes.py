"""Size CRUD endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.api.common import (
    ListingParams, commit_or_fail, delete_in_store, get_for_update, get_in_store, list_or_fail,
)
from store_admin.core.deps import StoreContext, require_store_owner
from store_admin.db.base import get_db
from store_admin.models.size import Size
from store_admin.schemas.size import SizeCreate, SizeUpdate, SizeResponse, SizeRow
from store_admin.schemas.common import DeleteResult, Page
from store_admin.services.query_builder import ResourceKind, build_query

router = APIRouter(prefix="/{store_id}/sizes", tags=["sizes"])


@router.get("", response_model=Page[SizeRow])
async def list_sizes(
    store_id: UUID,
    params: ListingParams = Depends(),
    db: AsyncSession = Depends(get_db),
):
    query = build_query(
        ResourceKind.SIZE, store_id, params.page_index, params.page_size, params.search_term
    )
    return await list_or_fail(db, query, "SIZE_GET")


@router.get("/{size_id}", response_model=SizeResponse | None)
async def get_size(
    store_id: UUID,
    size_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    size = await get_in_store(db, Size, size_id, store_id)
    return SizeResponse.model_validate(size) if size else None


@router.post("", response_model=SizeResponse)
async def create_size(
    body: SizeCreate,
    ctx: StoreContext = Depends(require_store_owner),
    db: AsyncSession = Depends(get_db),
):
    size = Size(**body.model_dump(), store_id=ctx.store_id)
    db.add(size)
    await commit_or_fail(db, "SIZE_POST")
    return SizeResponse.model_validate(size)


@router.patch("/{size_id}", response_model=SizeResponse)
async def update_size(
    size_id: UUID,
    body: SizeUpdate,
    ctx: StoreContext = Depends(require_store_owner),
    db: AsyncSession = Depends(get_db),
):
    size = await get_for_update(db, Size, size_id, ctx.store_id, "SIZE_PATCH")
    for field, value in body.model_dump().items():
        setattr(size, field, value)
    await commit_or_fail(db, "SIZE_PATCH")
    return SizeResponse.model_validate(size)


@router.delete("/{size_id}", response_model=DeleteResult)
async def delete_size(
    size_id: UUID,
    ctx: StoreContext = Depends(require_store_owner),
    db: AsyncSession = Depends(get_db),
):
    return await delete_in_store(db, Size, size_id, ctx.store_id, "SIZE_DELETE")
