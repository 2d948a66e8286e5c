"""Helpers shared by the resource routers."""

import logging
from uuid import UUID

from fastapi import Query
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.exceptions import InternalError
from store_admin.schemas.common import DeleteResult
from store_admin.services.listing import list_resource

logger = logging.getLogger(__name__)


class ListingParams:
    """Raw paging/search query parameters; parsed later by the query builder."""

    def __init__(
        self,
        page_index: str | None = Query(None, alias="pageIndex"),
        page_size: str | None = Query(None, alias="pageSize"),
        search_term: str | None = Query(None, alias="searchTerm"),
    ):
        self.page_index = page_index
        self.page_size = page_size
        self.search_term = search_term


async def commit_or_fail(db: AsyncSession, tag: str) -> None:
    """Commit, or roll back and surface a 500 tagged for the logs."""
    try:
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("[%s] commit failed", tag)
        raise InternalError()


async def get_in_store(db: AsyncSession, model, record_id: UUID, store_id: UUID):
    result = await db.execute(
        select(model).where(model.id == record_id, model.store_id == store_id)
    )
    return result.scalar_one_or_none()


async def exists_in_store(db: AsyncSession, model, record_id: UUID, store_id: UUID) -> bool:
    result = await db.execute(
        select(model.id).where(model.id == record_id, model.store_id == store_id)
    )
    return result.scalar_one_or_none() is not None


async def get_for_update(db: AsyncSession, model, record_id: UUID, store_id: UUID, tag: str):
    """Load a row the caller is about to replace; a missing row is a failed update."""
    record = await get_in_store(db, model, record_id, store_id)
    if record is None:
        logger.warning("[%s] %s %s not found in store %s", tag, model.__name__, record_id, store_id)
        raise InternalError()
    return record


async def delete_in_store(
    db: AsyncSession, model, record_id: UUID, store_id: UUID, tag: str
) -> DeleteResult:
    """Delete one row of the store; rows that others still reference are refused by the database."""
    try:
        result = await db.execute(
            delete(model).where(model.id == record_id, model.store_id == store_id)
        )
        await db.commit()
    except SQLAlchemyError:
        await db.rollback()
        logger.exception("[%s] delete of %s %s failed", tag, model.__name__, record_id)
        raise InternalError()
    return DeleteResult(count=result.rowcount)


async def list_or_fail(db: AsyncSession, query, tag: str):
    try:
        return await list_resource(db, query)
    except SQLAlchemyError:
        logger.exception("[%s] listing failed", tag)
        raise InternalError()
