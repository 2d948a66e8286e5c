"""Turn listing parameters into a store-scoped predicate and a page window.

Paging parameters are parsed permissively: dashboards send whatever is in the
address bar, so junk falls back to the defaults instead of failing the request.
"""

import enum
import re
import uuid
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Callable

from sqlalchemy import ColumnElement, String, cast, false, or_

from store_admin.models import Billboard, Category, Color, Order, OrderItem, Product, Size

DEFAULT_PAGE_INDEX = 0
DEFAULT_PAGE_SIZE = 10
# OFFSET and LIMIT are bound as signed 64-bit integers
MAX_WINDOW = 2**63 - 1

_LEADING_INT = re.compile(r"^\s*[+-]?\d+")
_LEADING_NUMBER = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


class ResourceKind(str, enum.Enum):
    BILLBOARD = "billboards"
    CATEGORY = "categories"
    COLOR = "colors"
    SIZE = "sizes"
    PRODUCT = "products"
    ORDER = "orders"


# Only products accept field filters
PRODUCT_FILTERS = {
    "categoryId": Product.category_id,
    "colorId": Product.color_id,
    "sizeId": Product.size_id,
}


@dataclass
class ListingQuery:
    kind: ResourceKind
    store_id: uuid.UUID
    conditions: list[ColumnElement[bool]]
    skip: int
    take: int
    search_term: str = ""
    filters: dict[str, str] = field(default_factory=dict)

    @property
    def model(self):
        return MODELS[self.kind]

    @property
    def order_by(self) -> list:
        return [self.model.created_at.desc(), self.model.id.desc()]


def _escape_like(s: str) -> str:
    """Escape SQL LIKE wildcards in user input."""
    return s.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _contains(column, term: str) -> ColumnElement[bool]:
    return column.ilike(f"%{_escape_like(term)}%", escape="\\")


def _parse_leading_int(raw: Any) -> int | None:
    if raw is None:
        return None
    match = _LEADING_INT.match(str(raw))
    return int(match.group(0)) if match else None


def parse_number(raw: str) -> Decimal | None:
    """Parse the numeric prefix of ``raw`` ("12.5abc" -> 12.5), or None."""
    match = _LEADING_NUMBER.match(raw)
    if not match:
        return None
    try:
        return Decimal(match.group(0).strip())
    except InvalidOperation:
        return None


def parse_page_index(raw: Any) -> int:
    value = _parse_leading_int(raw)
    if value is None or value < 0:
        return DEFAULT_PAGE_INDEX
    return value


def parse_page_size(raw: Any) -> int:
    value = _parse_leading_int(raw)
    if not value or value < 0:
        return DEFAULT_PAGE_SIZE
    return value


def _billboard_search(term: str) -> ColumnElement[bool]:
    return _contains(Billboard.label, term)


def _category_search(term: str) -> ColumnElement[bool]:
    return _contains(Category.name, term)


def _color_search(term: str) -> ColumnElement[bool]:
    return or_(_contains(Color.name, term), _contains(Color.value, term))


def _size_search(term: str) -> ColumnElement[bool]:
    return _contains(Size.name, term)


def _product_search(term: str) -> ColumnElement[bool]:
    clauses = [_contains(Product.name, term)]
    price = parse_number(term)
    if price is not None:
        clauses.append(Product.price == price)
    return or_(*clauses)


def _order_search(term: str) -> ColumnElement[bool]:
    return or_(
        _contains(cast(Order.id, String), term),
        Order.order_items.any(OrderItem.product.has(_contains(Product.name, term))),
    )


MODELS = {
    ResourceKind.BILLBOARD: Billboard,
    ResourceKind.CATEGORY: Category,
    ResourceKind.COLOR: Color,
    ResourceKind.SIZE: Size,
    ResourceKind.PRODUCT: Product,
    ResourceKind.ORDER: Order,
}

SEARCHES: dict[ResourceKind, Callable[[str], ColumnElement[bool]]] = {
    ResourceKind.BILLBOARD: _billboard_search,
    ResourceKind.CATEGORY: _category_search,
    ResourceKind.COLOR: _color_search,
    ResourceKind.SIZE: _size_search,
    ResourceKind.PRODUCT: _product_search,
    ResourceKind.ORDER: _order_search,
}


def _filter_condition(column, raw: str) -> ColumnElement[bool]:
    try:
        return column == uuid.UUID(raw)
    except ValueError:
        # An id that cannot exist matches nothing
        return false()


def build_query(
    kind: ResourceKind,
    store_id: uuid.UUID,
    page_index: Any = None,
    page_size: Any = None,
    search_term: str | None = None,
    filters: dict[str, str | None] | None = None,
) -> ListingQuery:
    """Compose the predicate and window for one listing request."""
    model = MODELS[kind]
    index = parse_page_index(page_index)
    size = parse_page_size(page_size)
    term = search_term or ""

    conditions: list[ColumnElement[bool]] = [model.store_id == store_id]
    applied: dict[str, str] = {}

    if kind is ResourceKind.PRODUCT:
        for name, column in PRODUCT_FILTERS.items():
            value = (filters or {}).get(name)
            if value:
                conditions.append(_filter_condition(column, value))
                applied[name] = value
        conditions.append(Product.is_archived.is_(False))

    if term:
        conditions.append(SEARCHES[kind](term))

    return ListingQuery(
        kind=kind,
        store_id=store_id,
        conditions=conditions,
        skip=min(index * size, MAX_WINDOW),
        take=min(size, MAX_WINDOW),
        search_term=term,
        filters=applied,
    )
