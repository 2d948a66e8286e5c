"""Store model - the tenant every other row belongs to."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from store_admin.db.base import Base
from store_admin.models.mixins import UUIDPrimaryKeyMixin, TimestampMixin


class Store(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "stores"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # Subject id issued by the identity provider
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Relationships
    billboards = relationship("Billboard", back_populates="store")
    categories = relationship("Category", back_populates="store")
    colors = relationship("Color", back_populates="store")
    sizes = relationship("Size", back_populates="store")
    products = relationship("Product", back_populates="store")
    orders = relationship("Order", back_populates="store", passive_deletes=True)

    def __repr__(self) -> str:
        return f"<Store {self.id}: {self.name}>"
