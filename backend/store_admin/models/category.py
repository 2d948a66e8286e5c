"""Category model - every category is shown with one billboard."""

import uuid

from sqlalchemy import String, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from store_admin.db.base import Base
from store_admin.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Category(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "categories"
    __table_args__ = (
        Index("ix_categories_store_created", "store_id", "created_at"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Foreign keys
    store_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("stores.id", ondelete="RESTRICT"), nullable=False
    )
    billboard_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("billboards.id", ondelete="RESTRICT"), nullable=False, index=True
    )

    # Relationships
    store = relationship("Store", back_populates="categories")
    billboard = relationship("Billboard", back_populates="categories", lazy="selectin")
    products = relationship("Product", back_populates="category")

    def __repr__(self) -> str:
        return f"<Category {self.name}>"
