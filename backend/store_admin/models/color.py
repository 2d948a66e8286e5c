"""Color model."""

import uuid

from sqlalchemy import String, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from store_admin.db.base import Base
from store_admin.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Color(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "colors"
    __table_args__ = (
        Index("ix_colors_store_created", "store_id", "created_at"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Hex code, e.g. "#ff0000"
    value: Mapped[str] = mapped_column(String(50), nullable=False)

    store_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("stores.id", ondelete="RESTRICT"), nullable=False
    )

    store = relationship("Store", back_populates="colors")
    products = relationship("Product", back_populates="color")

    def __repr__(self) -> str:
        return f"<Color {self.name}={self.value}>"
