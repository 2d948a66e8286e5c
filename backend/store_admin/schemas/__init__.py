from store_admin.schemas.common import Page, DeleteResult
from store_admin.schemas.store import StoreCreate, StoreUpdate, StoreResponse
from store_admin.schemas.billboard import (
    BillboardCreate, BillboardUpdate, BillboardResponse, BillboardRow,
)
from store_admin.schemas.category import (
    CategoryCreate, CategoryUpdate, CategoryResponse, CategoryDetail, CategoryRow,
)
from store_admin.schemas.color import ColorCreate, ColorUpdate, ColorResponse, ColorRow
from store_admin.schemas.size import SizeCreate, SizeUpdate, SizeResponse, SizeRow
from store_admin.schemas.product import (
    ImageIn, ProductCreate, ProductUpdate, ProductResponse, ProductDetail, ProductRow,
)
from store_admin.schemas.order import OrderResponse, OrderRow
from store_admin.schemas.revenue import GraphData, StoreOverview

__all__ = [
    "Page", "DeleteResult",
    "StoreCreate", "StoreUpdate", "StoreResponse",
    "BillboardCreate", "BillboardUpdate", "BillboardResponse", "BillboardRow",
    "CategoryCreate", "CategoryUpdate", "CategoryResponse", "CategoryDetail", "CategoryRow",
    "ColorCreate", "ColorUpdate", "ColorResponse", "ColorRow",
    "SizeCreate", "SizeUpdate", "SizeResponse", "SizeRow",
    "ImageIn", "ProductCreate", "ProductUpdate", "ProductResponse", "ProductDetail", "ProductRow",
    "OrderResponse", "OrderRow",
    "GraphData", "StoreOverview",
]
