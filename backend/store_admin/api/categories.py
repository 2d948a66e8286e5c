"""Category CRUD endpoints. Reads are open; writes require the store owner."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.api.common import (
    ListingParams,
    commit_or_fail,
    delete_in_store,
    exists_in_store,
    get_for_update,
    get_in_store,
    list_or_fail,
)
from store_admin.core.deps import StoreContext, require_store_owner
from store_admin.core.exceptions import InvalidFields
from store_admin.db.base import get_db
from store_admin.models.billboard import Billboard
from store_admin.models.category import Category
from store_admin.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
    CategoryDetail,
    CategoryRow,
)
from store_admin.schemas.common import DeleteResult, Page
from store_admin.services.query_builder import ResourceKind, build_query

router = APIRouter(prefix="/{store_id}/categories", tags=["categories"])


async def _check_billboard(db: AsyncSession, body: CategoryCreate, store_id: UUID) -> None:
    if not await exists_in_store(db, Billboard, body.billboard_id, store_id):
        raise InvalidFields("Billboard not found in this store")


@router.get("", response_model=Page[CategoryRow])
async def list_categories(
    store_id: UUID,
    params: ListingParams = Depends(),
    db: AsyncSession = Depends(get_db),
):
    query = build_query(
        ResourceKind.CATEGORY, store_id, params.page_index, params.page_size, params.search_term
    )
    return await list_or_fail(db, query, "CATEGORY_GET")


@router.get("/{category_id}", response_model=CategoryDetail | None)
async def get_category(
    store_id: UUID,
    category_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a single category with its billboard."""
    category = await get_in_store(db, Category, category_id, store_id)
    return CategoryDetail.model_validate(category) if category else None


@router.post("", response_model=CategoryResponse)
async def create_category(
    body: CategoryCreate,
    ctx: StoreContext = Depends(require_store_owner),
    db: AsyncSession = Depends(get_db),
):
    await _check_billboard(db, body, ctx.store_id)

    category = Category(**body.model_dump(), store_id=ctx.store_id)
    db.add(category)
    await commit_or_fail(db, "CATEGORY_POST")
    return CategoryResponse.model_validate(category)


@router.patch("/{category_id}", response_model=CategoryResponse)
async def update_category(
    category_id: UUID,
    body: CategoryUpdate,
    ctx: StoreContext = Depends(require_store_owner),
    db: AsyncSession = Depends(get_db),
):
    category = await get_for_update(db, Category, category_id, ctx.store_id, "CATEGORY_PATCH")
    await _check_billboard(db, body, ctx.store_id)

    for field, value in body.model_dump().items():
        setattr(category, field, value)
    await commit_or_fail(db, "CATEGORY_PATCH")
    return CategoryResponse.model_validate(category)


@router.delete("/{category_id}", response_model=DeleteResult)
async def delete_category(
    category_id: UUID,
    ctx: StoreContext = Depends(require_store_owner),
    db: AsyncSession = Depends(get_db),
):
    """Delete a category; refused while products still belong to it."""
    return await delete_in_store(db, Category, category_id, ctx.store_id, "CATEGORY_DELETE")
