"""SQLAlchemy models for the store admin."""

from store_admin.models.store import Store
from store_admin.models.billboard import Billboard
from store_admin.models.category import Category
from store_admin.models.color import Color
from store_admin.models.size import Size
from store_admin.models.product import Product, Image
from store_admin.models.order import Order, OrderItem

__all__ = [
    "Store",
    "Billboard",
    "Category",
    "Color",
    "Size",
    "Product",
    "Image",
    "Order",
    "OrderItem",
]
