"""Billboard model."""

import uuid

from sqlalchemy import String, ForeignKey, Index
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from store_admin.db.base import Base
from store_admin.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Billboard(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "billboards"
    __table_args__ = (
        Index("ix_billboards_store_created", "store_id", "created_at"),
    )

    label: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(String(1000), nullable=False)

    store_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("stores.id", ondelete="RESTRICT"), nullable=False
    )

    store = relationship("Store", back_populates="billboards")
    categories = relationship("Category", back_populates="billboard")

    def __repr__(self) -> str:
        return f"<Billboard {self.label}>"
