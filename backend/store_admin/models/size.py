"""Size model."""

import uuid

from sqlalchemy import String, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from store_admin.db.base import Base
from store_admin.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Size(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "sizes"
    __table_args__ = (
        Index("ix_sizes_store_created", "store_id", "created_at"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    value: Mapped[str] = mapped_column(String(255), nullable=False)

    store_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("stores.id", ondelete="RESTRICT"), nullable=False
    )

    store = relationship("Store", back_populates="sizes")
    products = relationship("Product", back_populates="size")

    def __repr__(self) -> str:
        return f"<Size {self.name}={self.value}>"
