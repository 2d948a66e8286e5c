"""Product CRUD endpoints.

A product always carries at least one image; updates replace the whole image
list along with the other fields.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query
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
from store_admin.models import Category, Color, Image, Product, Size
from store_admin.schemas.common import DeleteResult, Page
from store_admin.schemas.product import (
    ImageIn,
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductDetail,
    ProductRow,
)
from store_admin.services.query_builder import ResourceKind, build_query

router = APIRouter(prefix="/{store_id}/products", tags=["products"])


def _build_images(images: list[ImageIn]) -> list[Image]:
    return [Image(url=image.url, position=position) for position, image in enumerate(images)]


async def _validate_product(db: AsyncSession, body: ProductCreate, store_id: UUID) -> None:
    """Reject bodies without images or pointing at another store's options."""
    if not body.images:
        raise InvalidFields("At least one image is required")

    references = (
        (Category, body.category_id),
        (Color, body.color_id),
        (Size, body.size_id),
    )
    for model, record_id in references:
        if not await exists_in_store(db, model, record_id, store_id):
            raise InvalidFields(f"{model.__name__} not found in this store")


@router.get("", response_model=Page[ProductRow])
async def list_products(
    store_id: UUID,
    params: ListingParams = Depends(),
    category_id: str | None = Query(None, alias="categoryId"),
    color_id: str | None = Query(None, alias="colorId"),
    size_id: str | None = Query(None, alias="sizeId"),
    db: AsyncSession = Depends(get_db),
):
    """List non-archived products, optionally narrowed by category, color and size."""
    query = build_query(
        ResourceKind.PRODUCT,
        store_id,
        params.page_index,
        params.page_size,
        params.search_term,
        filters={"categoryId": category_id, "colorId": color_id, "sizeId": size_id},
    )
    return await list_or_fail(db, query, "PRODUCT_GET")


@router.get("/{product_id}", response_model=ProductDetail | None)
async def get_product(
    store_id: UUID,
    product_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    product = await get_in_store(db, Product, product_id, store_id)
    return ProductDetail.model_validate(product) if product else None


@router.post("", response_model=ProductResponse)
async def create_product(
    body: ProductCreate,
    ctx: StoreContext = Depends(require_store_owner),
    db: AsyncSession = Depends(get_db),
):
    await _validate_product(db, body, ctx.store_id)

    product = Product(
        **body.model_dump(exclude={"images"}),
        store_id=ctx.store_id,
        images=_build_images(body.images),
    )
    db.add(product)
    await commit_or_fail(db, "PRODUCT_POST")
    return ProductResponse.model_validate(product)


@router.patch("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: UUID,
    body: ProductUpdate,
    ctx: StoreContext = Depends(require_store_owner),
    db: AsyncSession = Depends(get_db),
):
    product = await get_for_update(db, Product, product_id, ctx.store_id, "PRODUCT_PATCH")
    await _validate_product(db, body, ctx.store_id)

    for field, value in body.model_dump(exclude={"images"}).items():
        setattr(product, field, value)
    # Old images are orphaned and deleted in the same commit
    product.images = _build_images(body.images)

    await commit_or_fail(db, "PRODUCT_PATCH")
    return ProductResponse.model_validate(product)


@router.delete("/{product_id}", response_model=DeleteResult)
async def delete_product(
    product_id: UUID,
    ctx: StoreContext = Depends(require_store_owner),
    db: AsyncSession = Depends(get_db),
):
    """Delete a product; refused while an order still lists it."""
    return await delete_in_store(db, Product, product_id, ctx.store_id, "PRODUCT_DELETE")
