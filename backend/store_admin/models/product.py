"""Product & Image models."""

import uuid
from decimal import Decimal

from sqlalchemy import String, Numeric, Boolean, Integer, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from store_admin.db.base import Base
from store_admin.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin, CreatedAtMixin


class Product(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "products"
    __table_args__ = (
        Index("ix_products_store_archived_created", "store_id", "is_archived", "created_at"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    is_featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_archived: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Foreign keys
    store_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("stores.id", ondelete="RESTRICT"), nullable=False
    )
    category_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    color_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("colors.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    size_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("sizes.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    # Relationships
    store = relationship("Store", back_populates="products")
    category = relationship("Category", back_populates="products", lazy="selectin")
    color = relationship("Color", back_populates="products", lazy="selectin")
    size = relationship("Size", back_populates="products", lazy="selectin")
    images = relationship(
        "Image",
        back_populates="product",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Image.position",
        lazy="selectin",
    )
    order_items = relationship("OrderItem", back_populates="product")

    def __repr__(self) -> str:
        return f"<Product {self.name} price={self.price}>"


class Image(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "images"

    url: Mapped[str] = mapped_column(String(1000), nullable=False)
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    product_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("products.id", ondelete="CASCADE"), nullable=False, index=True
    )

    product = relationship("Product", back_populates="images")

    def __repr__(self) -> str:
        return f"<Image {self.url}>"
