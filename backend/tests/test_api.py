"""End-to-end tests over HTTP: ownership guard, validation, referential refusals."""

import uuid
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import func, select

from store_admin.api.products import create_product
from store_admin.api.stores import delete_store
from store_admin.core.deps import StoreContext
from store_admin.core.exceptions import InternalError, InvalidFields
from store_admin.models import Billboard, Product, Store
from store_admin.schemas.product import ProductCreate


def _product_body(category, color, size, **overrides) -> dict:
    body = {
        "name": "Tee",
        "images": [{"url": "https://img.example/1.png"}, {"url": "https://img.example/2.png"}],
        "price": "19.99",
        "categoryId": str(category.id),
        "colorId": str(color.id),
        "sizeId": str(size.id),
    }
    body.update(overrides)
    return body


async def _count(session, model) -> int:
    return (await session.execute(select(func.count()).select_from(model))).scalar_one()


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


# ── Stores ────────────────────────────────────────

@pytest.mark.asyncio
async def test_create_and_list_own_stores(client, owner_headers, other_headers):
    resp = await client.post("/api/stores", json={"name": "Shoes"}, headers=owner_headers)
    assert resp.status_code == 200
    created = resp.json()
    assert created["name"] == "Shoes"
    assert created["userId"] == "user_owner"

    await client.post("/api/stores", json={"name": "Hats"}, headers=other_headers)

    resp = await client.get("/api/stores", headers=owner_headers)
    assert [s["name"] for s in resp.json()] == ["Shoes"]


@pytest.mark.asyncio
async def test_store_endpoints_need_a_caller(client):
    resp = await client.post("/api/stores", json={"name": "Shoes"})
    assert resp.status_code == 401
    assert resp.json() == "Unauthenticated"


@pytest.mark.asyncio
async def test_other_users_store_looks_missing(client, seed, other_headers):
    store = await seed.store()
    resp = await client.get(f"/api/stores/{store.id}", headers=other_headers)
    assert resp.status_code == 404
    assert resp.json() == "Unauthorized"


@pytest.mark.asyncio
async def test_store_with_billboards_cannot_be_deleted(client, seed, owner_headers):
    store = await seed.store()
    await seed.billboard(store)

    resp = await client.delete(f"/api/stores/{store.id}", headers=owner_headers)
    assert resp.status_code == 500
    assert resp.json() == "Internal error"


@pytest.mark.asyncio
async def test_blocked_store_delete_route_raises_internal_error(session, seed):
    seeded = await seed.store()
    await seed.billboard(seeded)
    store = await session.get(Store, seeded.id)
    ctx = StoreContext(store=store, user_id=store.user_id)

    with pytest.raises(InternalError):
        await delete_store(ctx, session)

    assert await _count(session, Store) == 1
    assert await _count(session, Billboard) == 1


@pytest.mark.asyncio
async def test_empty_store_can_be_deleted(client, seed, owner_headers):
    store = await seed.store()
    resp = await client.delete(f"/api/stores/{store.id}", headers=owner_headers)
    assert resp.status_code == 200
    assert resp.json() == {"count": 1}


# ── Guard on resource writes ──────────────────────

@pytest.mark.asyncio
async def test_anonymous_write_is_401(client, seed):
    store = await seed.store()
    resp = await client.post(
        f"/api/{store.id}/billboards", json={"label": "Hero", "imageUrl": "https://x/y.png"}
    )
    assert resp.status_code == 401
    assert resp.json() == "Unauthenticated"


@pytest.mark.asyncio
async def test_cross_tenant_update_is_404_and_changes_nothing(client, session, seed, other_headers):
    store = await seed.store()
    billboard = await seed.billboard(store, label="Original")

    resp = await client.patch(
        f"/api/{store.id}/billboards/{billboard.id}",
        json={"label": "Hijacked", "imageUrl": "https://x/y.png"},
        headers=other_headers,
    )

    assert resp.status_code == 404
    assert resp.json() == "Unauthorized"
    stored = await session.get(Billboard, billboard.id)
    assert stored.label == "Original"


@pytest.mark.asyncio
async def test_invalid_token_counts_as_anonymous(client, seed):
    store = await seed.store()
    resp = await client.delete(
        f"/api/{store.id}/billboards/{uuid.uuid4()}",
        headers={"Authorization": "Bearer not-a-jwt"},
    )
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_owner_creates_billboard(client, seed, owner_headers):
    store = await seed.store()
    resp = await client.post(
        f"/api/{store.id}/billboards",
        json={"label": "Hero", "imageUrl": "https://x/y.png"},
        headers=owner_headers,
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["label"] == "Hero"
    assert data["imageUrl"] == "https://x/y.png"
    assert data["storeId"] == str(store.id)


@pytest.mark.asyncio
async def test_missing_fields_are_400(client, seed, owner_headers):
    store = await seed.store()
    resp = await client.post(
        f"/api/{store.id}/billboards", json={"label": "Hero"}, headers=owner_headers
    )
    assert resp.status_code == 400
    assert resp.json() == "Invalid fields"


@pytest.mark.asyncio
async def test_update_of_missing_row_fails(client, seed, owner_headers):
    store = await seed.store()
    resp = await client.patch(
        f"/api/{store.id}/billboards/{uuid.uuid4()}",
        json={"label": "Hero", "imageUrl": "https://x/y.png"},
        headers=owner_headers,
    )
    assert resp.status_code == 500


# ── Reads ─────────────────────────────────────────

@pytest.mark.asyncio
async def test_listing_is_open_and_tolerates_junk_paging(client, seed):
    store = await seed.store()
    for i in range(12):
        await seed.billboard(store, label=f"B{i}")

    resp = await client.get(
        f"/api/{store.id}/billboards", params={"pageIndex": "abc", "pageSize": "0"}
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["totalRecords"] == 12
    assert len(body["data"]) == 10
    assert body["data"][0]["label"] == "B11"


@pytest.mark.asyncio
async def test_second_page_and_search(client, seed):
    store = await seed.store()
    for i in range(12):
        await seed.billboard(store, label=f"B{i}")
    await seed.billboard(store, label="Summer Sale")

    page = (await client.get(
        f"/api/{store.id}/billboards", params={"pageIndex": "1", "pageSize": "10"}
    )).json()
    assert len(page["data"]) == 3

    found = (await client.get(
        f"/api/{store.id}/billboards", params={"searchTerm": "summer"}
    )).json()
    assert [row["label"] for row in found["data"]] == ["Summer Sale"]
    assert found["totalRecords"] == 1


@pytest.mark.asyncio
async def test_absurd_page_index_gives_empty_page(client, seed):
    store = await seed.store()
    await seed.billboard(store)

    resp = await client.get(
        f"/api/{store.id}/billboards",
        params={"pageIndex": "99999999999999999999", "pageSize": "99999999999999999999"},
    )
    assert resp.status_code == 200
    assert resp.json() == {"data": [], "totalRecords": 1}


@pytest.mark.asyncio
async def test_get_missing_billboard_is_null(client, seed):
    store = await seed.store()
    resp = await client.get(f"/api/{store.id}/billboards/{uuid.uuid4()}")
    assert resp.status_code == 200
    assert resp.json() is None


# ── Products ──────────────────────────────────────

@pytest.mark.asyncio
async def test_product_without_images_is_rejected_before_any_write(
    client, session, seed, owner_headers
):
    store = await seed.store()
    category, color, size = await seed.catalog(store)

    resp = await client.post(
        f"/api/{store.id}/products",
        json=_product_body(category, color, size, images=[]),
        headers=owner_headers,
    )

    assert resp.status_code == 400
    assert resp.json() == "At least one image is required"
    assert await _count(session, Product) == 0


@pytest.mark.asyncio
async def test_create_product_route_checks_images_first():
    db = AsyncMock()
    db.add = MagicMock()
    ctx = StoreContext(store=MagicMock(id=uuid.uuid4()), user_id="user_owner")
    body = ProductCreate(
        name="Tee",
        images=[],
        price="1.00",
        category_id=uuid.uuid4(),
        color_id=uuid.uuid4(),
        size_id=uuid.uuid4(),
    )

    with pytest.raises(InvalidFields):
        await create_product(body, ctx, db)

    db.execute.assert_not_awaited()
    db.add.assert_not_called()
    db.commit.assert_not_awaited()


@pytest.mark.asyncio
async def test_product_cannot_use_another_stores_category(client, seed, owner_headers):
    store = await seed.store()
    other = await seed.store(user_id="user_other")
    _, color, size = await seed.catalog(store)
    foreign_category, _, _ = await seed.catalog(other)

    resp = await client.post(
        f"/api/{store.id}/products",
        json=_product_body(foreign_category, color, size),
        headers=owner_headers,
    )
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_create_product_keeps_image_order(client, seed, owner_headers):
    store = await seed.store()
    category, color, size = await seed.catalog(store)

    resp = await client.post(
        f"/api/{store.id}/products",
        json=_product_body(category, color, size),
        headers=owner_headers,
    )

    assert resp.status_code == 200
    data = resp.json()
    assert data["price"] == 19.99
    assert [img["url"] for img in data["images"]] == [
        "https://img.example/1.png",
        "https://img.example/2.png",
    ]


@pytest.mark.asyncio
async def test_update_product_replaces_images(client, seed, owner_headers):
    store = await seed.store()
    category, color, size = await seed.catalog(store)
    product = await seed.product(store, category, color, size)

    resp = await client.patch(
        f"/api/{store.id}/products/{product.id}",
        json=_product_body(
            category, color, size, name="Renamed", images=[{"url": "https://img.example/new.png"}]
        ),
        headers=owner_headers,
    )
    assert resp.status_code == 200

    detail = (await client.get(f"/api/{store.id}/products/{product.id}")).json()
    assert detail["name"] == "Renamed"
    assert [img["url"] for img in detail["images"]] == ["https://img.example/new.png"]
    assert detail["category"]["id"] == str(category.id)


# ── Referential refusals ──────────────────────────

@pytest.mark.asyncio
async def test_category_in_use_cannot_be_deleted(client, session, seed, owner_headers):
    store = await seed.store()
    category, color, size = await seed.catalog(store)
    await seed.product(store, category, color, size)

    resp = await client.delete(f"/api/{store.id}/categories/{category.id}", headers=owner_headers)

    assert resp.status_code == 500
    assert resp.json() == "Internal error"
    assert await _count(session, Product) == 1


@pytest.mark.asyncio
async def test_unused_category_is_deleted(client, seed, owner_headers):
    store = await seed.store()
    category, _, _ = await seed.catalog(store)

    resp = await client.delete(f"/api/{store.id}/categories/{category.id}", headers=owner_headers)
    assert resp.status_code == 200
    assert resp.json() == {"count": 1}


@pytest.mark.asyncio
async def test_ordered_product_cannot_be_deleted(client, seed, owner_headers):
    store = await seed.store()
    category, color, size = await seed.catalog(store)
    product = await seed.product(store, category, color, size)
    await seed.order(store, [product])

    resp = await client.delete(f"/api/{store.id}/products/{product.id}", headers=owner_headers)
    assert resp.status_code == 500


# ── Dashboard ─────────────────────────────────────

@pytest.mark.asyncio
async def test_revenue_is_open_and_has_twelve_months(client, seed):
    store = await seed.store()
    resp = await client.get(f"/api/{store.id}/revenue")
    assert resp.status_code == 200
    assert [m["name"] for m in resp.json()][:3] == ["Jan", "Feb", "Mar"]
    assert len(resp.json()) == 12


@pytest.mark.asyncio
async def test_overview_is_owner_only(client, seed, owner_headers, other_headers):
    store = await seed.store()

    resp = await client.get(f"/api/{store.id}/overview", headers=other_headers)
    assert resp.status_code == 404

    resp = await client.get(f"/api/{store.id}/overview", headers=owner_headers)
    assert resp.status_code == 200
    body = resp.json()
    assert body["salesCount"] == 0
    assert body["stockCount"] == 0
    assert len(body["graphRevenue"]) == 12
