from fastapi import APIRouter

from store_admin.api import (
    billboards, categories, colors, orders, overview, products, sizes, stores, webhook,
)

api_router = APIRouter(prefix="/api")
# Literal prefixes first so they never fall through to /{store_id}/...
api_router.include_router(stores.router)
api_router.include_router(webhook.router)
api_router.include_router(billboards.router)
api_router.include_router(categories.router)
api_router.include_router(colors.router)
api_router.include_router(sizes.router)
api_router.include_router(products.router)
api_router.include_router(orders.router)
api_router.include_router(overview.router)
