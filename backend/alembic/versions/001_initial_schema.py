"""Initial database schema - stores, billboards, categories, colors, sizes, products, images, orders

Revision ID: 001_initial
Revises: None
Create Date: 2024-06-03
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def _store_fk(ondelete: str = "RESTRICT") -> sa.Column:
    return sa.Column(
        "store_id",
        postgresql.UUID(as_uuid=True),
        sa.ForeignKey("stores.id", ondelete=ondelete),
        nullable=False,
    )


def upgrade() -> None:
    # --- Stores ---
    op.create_table(
        "stores",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("user_id", sa.String(255), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_stores_user_id", "stores", ["user_id"])

    # --- Billboards ---
    op.create_table(
        "billboards",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("label", sa.String(255), nullable=False),
        sa.Column("image_url", sa.String(1000), nullable=False),
        _store_fk(),
        *_timestamps(),
    )
    op.create_index("ix_billboards_store_created", "billboards", ["store_id", "created_at"])

    # --- Categories ---
    op.create_table(
        "categories",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        _store_fk(),
        sa.Column("billboard_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("billboards.id", ondelete="RESTRICT"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_categories_name", "categories", ["name"])
    op.create_index("ix_categories_billboard_id", "categories", ["billboard_id"])
    op.create_index("ix_categories_store_created", "categories", ["store_id", "created_at"])

    # --- Colors ---
    op.create_table(
        "colors",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("value", sa.String(50), nullable=False),
        _store_fk(),
        *_timestamps(),
    )
    op.create_index("ix_colors_store_created", "colors", ["store_id", "created_at"])

    # --- Sizes ---
    op.create_table(
        "sizes",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("value", sa.String(255), nullable=False),
        _store_fk(),
        *_timestamps(),
    )
    op.create_index("ix_sizes_store_created", "sizes", ["store_id", "created_at"])

    # --- Products ---
    op.create_table(
        "products",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("price", sa.Numeric(12, 2), nullable=False),
        sa.Column("is_featured", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("is_archived", sa.Boolean, nullable=False, server_default=sa.text("false")),
        _store_fk(),
        sa.Column("category_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("color_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("colors.id", ondelete="RESTRICT"), nullable=False),
        sa.Column("size_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("sizes.id", ondelete="RESTRICT"), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_products_name", "products", ["name"])
    op.create_index("ix_products_category_id", "products", ["category_id"])
    op.create_index("ix_products_color_id", "products", ["color_id"])
    op.create_index("ix_products_size_id", "products", ["size_id"])
    op.create_index(
        "ix_products_store_archived_created", "products", ["store_id", "is_archived", "created_at"]
    )

    # --- Images ---
    op.create_table(
        "images",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("url", sa.String(1000), nullable=False),
        sa.Column("position", sa.Integer, nullable=False, server_default=sa.text("0")),
        sa.Column("product_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("products.id", ondelete="CASCADE"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_images_product_id", "images", ["product_id"])

    # --- Orders ---
    op.create_table(
        "orders",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("is_paid", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("phone", sa.String(50), nullable=False, server_default=sa.text("''")),
        sa.Column("address", sa.Text, nullable=False, server_default=sa.text("''")),
        _store_fk(ondelete="CASCADE"),
        *_timestamps(),
    )
    op.create_index("ix_orders_store_created", "orders", ["store_id", "created_at"])
    op.create_index("ix_orders_store_paid_created", "orders", ["store_id", "is_paid", "created_at"])

    # --- Order Items ---
    op.create_table(
        "order_items",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("order_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("orders.id", ondelete="CASCADE"), nullable=False),
        sa.Column("product_id", postgresql.UUID(as_uuid=True), sa.ForeignKey("products.id", ondelete="RESTRICT"), nullable=False),
    )
    op.create_index("ix_order_items_order_id", "order_items", ["order_id"])
    op.create_index("ix_order_items_product_id", "order_items", ["product_id"])


def downgrade() -> None:
    op.drop_table("order_items")
    op.drop_table("orders")
    op.drop_table("images")
    op.drop_table("products")
    op.drop_table("sizes")
    op.drop_table("colors")
    op.drop_table("categories")
    op.drop_table("billboards")
    op.drop_table("stores")
