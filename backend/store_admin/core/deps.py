"""Dependency injection: caller identity and the store-ownership guard."""

import enum
import logging
from dataclasses import dataclass
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from store_admin.core.exceptions import AuthenticationRequired, AuthorizationDenied
from store_admin.core.security import decode_access_token
from store_admin.db.base import get_db
from store_admin.models.store import Store

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class StoreAccess(str, enum.Enum):
    AUTHENTICATED_OWNER = "authenticated_owner"
    UNAUTHENTICATED = "unauthenticated"
    UNAUTHORIZED = "unauthorized"


@dataclass
class StoreContext:
    store: Store
    user_id: str

    @property
    def store_id(self) -> UUID:
        return self.store.id


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str | None:
    """Return the caller's user id, or None when there is no usable token."""
    if credentials is None:
        return None
    try:
        payload = decode_access_token(credentials.credentials)
    except JWTError:
        logger.debug("Ignoring invalid bearer token")
        return None
    user_id = payload.get("sub")
    return user_id or None


async def require_user_id(user_id: str | None = Depends(get_current_user_id)) -> str:
    if user_id is None:
        raise AuthenticationRequired()
    return user_id


async def find_owned_store(db: AsyncSession, store_id: UUID, user_id: str) -> Store | None:
    result = await db.execute(
        select(Store).where(Store.id == store_id, Store.user_id == user_id)
    )
    return result.scalar_one_or_none()


async def check_store_access(
    db: AsyncSession, store_id: UUID, user_id: str | None
) -> tuple[StoreAccess, Store | None]:
    """Classify the caller against the target store."""
    if user_id is None:
        return StoreAccess.UNAUTHENTICATED, None
    store = await find_owned_store(db, store_id, user_id)
    if store is None:
        return StoreAccess.UNAUTHORIZED, None
    return StoreAccess.AUTHENTICATED_OWNER, store


async def require_store_owner(
    store_id: UUID,
    user_id: str | None = Depends(get_current_user_id),
    db: AsyncSession = Depends(get_db),
) -> StoreContext:
    """Gate for every write under ``/api/{storeId}``."""
    access, store = await check_store_access(db, store_id, user_id)
    if access is StoreAccess.UNAUTHENTICATED:
        raise AuthenticationRequired()
    if access is StoreAccess.UNAUTHORIZED:
        logger.info("User %s denied access to store %s", user_id, store_id)
        raise AuthorizationDenied()
    return StoreContext(store=store, user_id=user_id)
