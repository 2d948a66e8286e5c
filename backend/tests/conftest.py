"""Shared fixtures: an in-memory SQLite database, an HTTP client and row factories."""

import uuid
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from store_admin.core.security import create_access_token
from store_admin.db.base import Database
from store_admin.main import create_app
from store_admin.models import (
    Billboard, Category, Color, Image, Order, OrderItem, Product, Size, Store,
)

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


class Seeder:
    """Creates committed rows; each call gets a later ``created_at`` than the last."""

    def __init__(self, session):
        self.session = session
        self._tick = 0

    def _next_time(self) -> datetime:
        self._tick += 1
        return BASE_TIME + timedelta(minutes=self._tick)

    async def _save(self, obj):
        self.session.add(obj)
        await self.session.commit()
        return obj

    async def store(self, user_id: str = "user_owner", name: str = "Main store") -> Store:
        return await self._save(Store(name=name, user_id=user_id))

    async def billboard(self, store: Store, label: str = "Billboard") -> Billboard:
        return await self._save(Billboard(
            store_id=store.id, label=label, image_url="https://img.example/b.png",
            created_at=self._next_time(),
        ))

    async def category(self, store: Store, billboard: Billboard, name: str = "Shirts") -> Category:
        return await self._save(Category(
            store_id=store.id, billboard_id=billboard.id, name=name, created_at=self._next_time(),
        ))

    async def color(self, store: Store, name: str = "Red", value: str = "#ff0000") -> Color:
        return await self._save(Color(
            store_id=store.id, name=name, value=value, created_at=self._next_time(),
        ))

    async def size(self, store: Store, name: str = "Large", value: str = "L") -> Size:
        return await self._save(Size(
            store_id=store.id, name=name, value=value, created_at=self._next_time(),
        ))

    async def product(
        self,
        store: Store,
        category: Category,
        color: Color,
        size: Size,
        name: str = "Tee",
        price: str = "10.00",
        is_archived: bool = False,
    ) -> Product:
        return await self._save(Product(
            store_id=store.id,
            category_id=category.id,
            color_id=color.id,
            size_id=size.id,
            name=name,
            price=Decimal(price),
            is_archived=is_archived,
            images=[Image(url="https://img.example/p.png", position=0)],
            created_at=self._next_time(),
        ))

    async def order(
        self,
        store: Store,
        products: list[Product],
        is_paid: bool = True,
        created_at: datetime | None = None,
    ) -> Order:
        return await self._save(Order(
            store_id=store.id,
            is_paid=is_paid,
            phone="555-0100",
            address="1 Main St",
            created_at=created_at or self._next_time(),
            order_items=[OrderItem(product_id=product.id) for product in products],
        ))

    async def catalog(self, store: Store):
        """A billboard, category, color and size ready for products."""
        billboard = await self.billboard(store)
        category = await self.category(store, billboard)
        color = await self.color(store)
        size = await self.size(store)
        return category, color, size


@pytest_asyncio.fixture
async def database():
    db = Database("sqlite+aiosqlite://", poolclass=StaticPool)
    await db.create_all()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def session(database):
    async with database.sessionmaker() as s:
        yield s


@pytest_asyncio.fixture
async def seed(database):
    # Separate from `session` so reads never see half-loaded objects from setup
    async with database.sessionmaker() as s:
        yield Seeder(s)


@pytest_asyncio.fixture
async def client(database):
    app = create_app()
    app.state.db = database
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


def auth_headers(user_id: str = "user_owner") -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
def owner_headers() -> dict[str, str]:
    return auth_headers("user_owner")


@pytest.fixture
def other_headers() -> dict[str, str]:
    return auth_headers("user_other")


def random_id() -> str:
    return str(uuid.uuid4())
