"""Color CRUD endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.api.common import (
    ListingParams, commit_or_fail, delete_in_store, get_for_update, get_in_store, list_or_fail,
)
from store_admin.core.deps import StoreContext, require_store_owner
from store_admin.db.base import get_db
from store_admin.models.color import Color
from store_admin.schemas.color import ColorCreate, ColorUpdate, ColorResponse, ColorRow
from store_admin.schemas.common import DeleteResult, Page
from store_admin.services.query_builder import ResourceKind, build_query

router = APIRouter(prefix="/{store_id}/colors", tags=["colors"])


@router.get("", response_model=Page[ColorRow])
async def list_colors(
    store_id: UUID,
    params: ListingParams = Depends(),
    db: AsyncSession = Depends(get_db),
):
    query = build_query(
        ResourceKind.COLOR, store_id, params.page_index, params.page_size, params.search_term
    )
    return await list_or_fail(db, query, "COLOR_GET")


@router.get("/{color_id}", response_model=ColorResponse | None)
async def get_color(
    store_id: UUID,
    color_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    color = await get_in_store(db, Color, color_id, store_id)
    return ColorResponse.model_validate(color) if color else None


@router.post("", response_model=ColorResponse)
async def create_color(
    body: ColorCreate,
    ctx: StoreContext = Depends(require_store_owner),
    db: AsyncSession = Depends(get_db),
):
    color = Color(**body.model_dump(), store_id=ctx.store_id)
    db.add(color)
    await commit_or_fail(db, "COLOR_POST")
    return ColorResponse.model_validate(color)


@router.patch("/{color_id}", response_model=ColorResponse)
async def update_color(
    color_id: UUID,
    body: ColorUpdate,
    ctx: StoreContext = Depends(require_store_owner),
    db: AsyncSession = Depends(get_db),
):
    color = await get_for_update(db, Color, color_id, ctx.store_id, "COLOR_PATCH")
    for field, value in body.model_dump().items():
        setattr(color, field, value)
    await commit_or_fail(db, "COLOR_PATCH")
    return ColorResponse.model_validate(color)


@router.delete("/{color_id}", response_model=DeleteResult)
async def delete_color(
    color_id: UUID,
    ctx: StoreContext = Depends(require_store_owner),
    db: AsyncSession = Depends(get_db),
):
    return await delete_in_store(db, Color, color_id, ctx.store_id, "COLOR_DELETE")
