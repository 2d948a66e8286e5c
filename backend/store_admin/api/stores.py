"""Store endpoints: signup creates a store, the owner renames or deletes it."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.api.common import commit_or_fail
from store_admin.core.deps import StoreContext, require_store_owner, require_user_id
from store_admin.core.exceptions import InternalError
from store_admin.db.base import get_db
from store_admin.models.store import Store
from store_admin.schemas.common import DeleteResult
from store_admin.schemas.store import StoreCreate, StoreUpdate, StoreResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/stores", tags=["stores"])


@router.get("", response_model=list[StoreResponse])
async def list_stores(
    user_id: str = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Stores owned by the caller, oldest first."""
    result = await db.execute(
        select(Store).where(Store.user_id == user_id).order_by(Store.created_at)
    )
    return [StoreResponse.model_validate(store) for store in result.scalars().all()]


@router.post("", response_model=StoreResponse)
async def create_store(
    body: StoreCreate,
    user_id: str = Depends(require_user_id),
    db: AsyncSession = Depends(get_db),
):
    store = Store(name=body.name, user_id=user_id)
    db.add(store)
    await commit_or_fail(db, "STORES_POST")
    logger.info("User %s created store %s", user_id, store.id)
    return StoreResponse.model_validate(store)


@router.get("/{store_id}", response_model=StoreResponse)
async def get_store(ctx: StoreContext = Depends(require_store_owner)):
    return StoreResponse.model_validate(ctx.store)


@router.patch("/{store_id}", response_model=StoreResponse)
async def update_store(
    body: StoreUpdate,
    ctx: StoreContext = Depends(require_store_owner),
    db: AsyncSession = Depends(get_db),
):
    ctx.store.name = body.name
    await commit_or_fail(db, "STORE_PATCH")
    return StoreResponse.model_validate(ctx.store)


@router.delete("/{store_id}", response_model=DeleteResult)
async def delete_store(
    ctx: StoreContext = Depends(require_store_owner),
    db: AsyncSession = Depends(get_db),
):
    """Delete the store; refused while any billboard, category, color, size or product remains."""
    # Rollback expires ctx.store, so its id is read up front
    store_id = ctx.store_id
    try:
        result = await db.execute(
            delete(Store).where(Store.id == store_id, Store.user_id == ctx.user_id)
        )
        await db.commit()
    except SQLAlchemyError:
        logger.exception("[STORE_DELETE] delete of store %s failed", store_id)
        await db.rollback()
        raise InternalError()
    return DeleteResult(count=result.rowcount)
