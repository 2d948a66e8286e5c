"""Unit tests for tokens and the store-ownership guard."""

import uuid
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.security import HTTPAuthorizationCredentials
from jose import jwt

from store_admin.core.config import settings
from store_admin.core.deps import (
    StoreAccess,
    check_store_access,
    get_current_user_id,
    require_store_owner,
    require_user_id,
)
from store_admin.core.exceptions import AuthenticationRequired, AuthorizationDenied
from store_admin.core.security import create_access_token, decode_access_token


def _bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


def _db_returning(store):
    db = AsyncMock()
    result = MagicMock()
    result.scalar_one_or_none.return_value = store
    db.execute.return_value = result
    return db


# ── JWT ────────────────────────────────────────────

def test_create_and_decode_token():
    token = create_access_token("user_123")
    payload = decode_access_token(token)
    assert payload["sub"] == "user_123"
    assert "exp" in payload


def test_expired_token():
    token = create_access_token("user_123", expires_delta=timedelta(seconds=-1))
    with pytest.raises(Exception):
        decode_access_token(token)


# ── Caller identity ───────────────────────────────

@pytest.mark.asyncio
async def test_no_credentials_is_anonymous():
    assert await get_current_user_id(None) is None


@pytest.mark.asyncio
async def test_valid_token_yields_user_id():
    token = create_access_token("user_123")
    assert await get_current_user_id(_bearer(token)) == "user_123"


@pytest.mark.asyncio
async def test_garbage_token_is_anonymous():
    assert await get_current_user_id(_bearer("not-a-jwt")) is None


@pytest.mark.asyncio
async def test_token_signed_with_other_key_is_anonymous():
    token = jwt.encode({"sub": "user_123"}, "some-other-key", algorithm=settings.ALGORITHM)
    assert await get_current_user_id(_bearer(token)) is None


@pytest.mark.asyncio
async def test_token_without_subject_is_anonymous():
    token = jwt.encode({"foo": "bar"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    assert await get_current_user_id(_bearer(token)) is None


@pytest.mark.asyncio
async def test_require_user_id_rejects_anonymous():
    with pytest.raises(AuthenticationRequired) as exc_info:
        await require_user_id(None)
    assert exc_info.value.status_code == 401
    assert exc_info.value.detail == "Unauthenticated"


# ── Store access ──────────────────────────────────

@pytest.mark.asyncio
async def test_anonymous_caller_never_hits_the_database():
    db = _db_returning(None)
    access, store = await check_store_access(db, uuid.uuid4(), None)
    assert access is StoreAccess.UNAUTHENTICATED
    assert store is None
    db.execute.assert_not_awaited()


@pytest.mark.asyncio
async def test_owner_gets_the_store():
    owned = MagicMock(id=uuid.uuid4(), user_id="user_123")
    access, store = await check_store_access(_db_returning(owned), owned.id, "user_123")
    assert access is StoreAccess.AUTHENTICATED_OWNER
    assert store is owned


@pytest.mark.asyncio
async def test_non_owner_is_unauthorized():
    access, store = await check_store_access(_db_returning(None), uuid.uuid4(), "user_123")
    assert access is StoreAccess.UNAUTHORIZED
    assert store is None


@pytest.mark.asyncio
async def test_require_store_owner_reports_401_then_404():
    with pytest.raises(AuthenticationRequired):
        await require_store_owner(uuid.uuid4(), None, _db_returning(None))

    with pytest.raises(AuthorizationDenied) as exc_info:
        await require_store_owner(uuid.uuid4(), "user_123", _db_returning(None))
    assert exc_info.value.status_code == 404
    assert exc_info.value.detail == "Unauthorized"


@pytest.mark.asyncio
async def test_require_store_owner_builds_context():
    owned = MagicMock(id=uuid.uuid4(), user_id="user_123")
    ctx = await require_store_owner(owned.id, "user_123", _db_returning(owned))
    assert ctx.store is owned
    assert ctx.store_id == owned.id
    assert ctx.user_id == "user_123"
