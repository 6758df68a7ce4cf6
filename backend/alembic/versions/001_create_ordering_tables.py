"""Create ordering tables

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates the six tables of the ordering backend: customers,
       restaurants, menus, orders, payments, shippings.
How:   Tables are created parents first so foreign keys resolve; downgrade
       drops them in reverse order.

Rollback: downgrade() drops every table (all data lost).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "tbl_customers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(100), nullable=False),
        sa.Column("password", sa.String(255), nullable=False, comment="bcrypt digest"),
        sa.Column("firstname", sa.String(100), nullable=True),
        sa.Column("fullname", sa.String(200), nullable=True),
        sa.Column("lastname", sa.String(100), nullable=True),
        sa.Column("address", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(20), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "tbl_restaurants",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("restaurant_name", sa.String(200), nullable=False),
        sa.Column("address", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(20), nullable=True),
        sa.Column("menu_description", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "tbl_menus",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("restaurant_id", sa.Integer(), nullable=False),
        sa.Column("menu_name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("category", sa.String(100), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["restaurant_id"], ["tbl_restaurants.id"]),
    )
    op.create_index("ix_tbl_menus_restaurant_id", "tbl_menus", ["restaurant_id"])

    op.create_table(
        "tbl_orders",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("customer_id", sa.Integer(), nullable=False),
        sa.Column("restaurant_id", sa.Integer(), nullable=False),
        sa.Column("menu_id", sa.Integer(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False, comment="menu price at order time"),
        sa.Column("total_price", sa.Numeric(12, 2), nullable=False),
        sa.Column("status", sa.String(50), nullable=False, server_default=sa.text("'pending'")),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["customer_id"], ["tbl_customers.id"]),
        sa.ForeignKeyConstraint(["restaurant_id"], ["tbl_restaurants.id"]),
        sa.ForeignKeyConstraint(["menu_id"], ["tbl_menus.id"]),
    )
    # Backs GET /api/orders/summary (aggregate per customer)
    op.create_index("ix_tbl_orders_customer_id", "tbl_orders", ["customer_id"])

    op.create_table(
        "tbl_payments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("order_id", sa.Integer(), nullable=False),
        sa.Column("payment_method", sa.String(20), nullable=False),
        sa.Column(
            "payment_status", sa.String(20), nullable=False, server_default=sa.text("'unpaid'")
        ),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("paid_at", sa.TIMESTAMP(timezone=True), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["order_id"], ["tbl_orders.id"]),
        sa.CheckConstraint(
            "payment_method IN ('cash', 'CQ_code', 'prompay')", name="ck_payments_method"
        ),
        sa.CheckConstraint("payment_status IN ('paid', 'unpaid')", name="ck_payments_status"),
    )
    op.create_index("ix_tbl_payments_order_id", "tbl_payments", ["order_id"])

    op.create_table(
        "tbl_shippings",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("order_id", sa.Integer(), nullable=False),
        sa.Column("receiver_name", sa.String(200), nullable=False),
        sa.Column("shipping_address", sa.Text(), nullable=False),
        sa.Column("phone", sa.String(20), nullable=False),
        sa.Column(
            "shipping_status", sa.String(50), nullable=False, server_default=sa.text("'pending'")
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["order_id"], ["tbl_orders.id"]),
    )
    op.create_index("ix_tbl_shippings_order_id", "tbl_shippings", ["order_id"])


def downgrade() -> None:
    op.drop_index("ix_tbl_shippings_order_id", table_name="tbl_shippings")
    op.drop_table("tbl_shippings")
    op.drop_index("ix_tbl_payments_order_id", table_name="tbl_payments")
    op.drop_table("tbl_payments")
    op.drop_index("ix_tbl_orders_customer_id", table_name="tbl_orders")
    op.drop_table("tbl_orders")
    op.drop_index("ix_tbl_menus_restaurant_id", table_name="tbl_menus")
    op.drop_table("tbl_menus")
    op.drop_table("tbl_restaurants")
    op.drop_table("tbl_customers")
