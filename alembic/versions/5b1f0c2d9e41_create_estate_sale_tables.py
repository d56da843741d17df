"""create_estate_sale_tables

Revision ID: 5b1f0c2d9e41
Revises:
Create Date: 2025-08-14 10:12:40.518220
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1f0c2d9e41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""

    # EVENTS
    op.create_table(
        "estate_sale_events",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("location", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.CheckConstraint("end_date >= start_date", name="ck_event_dates_ordered"),
    )
    op.create_index("ix_estate_sale_events_id", "estate_sale_events", ["id"], unique=False)

    # ITEMS
    op.create_table(
        "items",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "event_id",
            sa.Integer(),
            sa.ForeignKey("estate_sale_events.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("starting_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="Available"),
        sa.CheckConstraint("starting_price >= 0", name="ck_starting_price_non_negative"),
        sa.CheckConstraint(
            "status IN ('Available', 'Held', 'Sold')",
            name="ck_item_status_valid",
        ),
    )
    op.create_index("ix_items_id", "items", ["id"], unique=False)
    op.create_index("ix_items_event_id", "items", ["event_id"], unique=False)
    op.create_index("ix_items_status", "items", ["status"], unique=False)

    # CUSTOMERS
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("first_name", sa.String(length=100), nullable=False),
        sa.Column("last_name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=30), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_customers_id", "customers", ["id"], unique=False)
    op.create_index("ix_customers_email", "customers", ["email"], unique=True)

    # SALES
    op.create_table(
        "sales",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column(
            "customer_id",
            sa.Integer(),
            sa.ForeignKey("customers.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("sale_date", sa.Date(), nullable=False),
        sa.Column("total_amount", sa.Numeric(10, 2), nullable=False),
        sa.Column("payment_method", sa.String(length=20), nullable=False),
        sa.CheckConstraint("total_amount >= 0", name="ck_total_amount_non_negative"),
        sa.CheckConstraint(
            "payment_method IN ('Cash', 'Credit Card', 'Check')",
            name="ck_payment_method_valid",
        ),
    )
    op.create_index("ix_sales_id", "sales", ["id"], unique=False)
    op.create_index("ix_sales_customer_id", "sales", ["customer_id"], unique=False)
    op.create_index("ix_sales_sale_date", "sales", ["sale_date"], unique=False)

    # SOLD ITEMS
    op.create_table(
        "sold_items",
        sa.Column(
            "sale_id",
            sa.Integer(),
            sa.ForeignKey("sales.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "item_id",
            sa.Integer(),
            sa.ForeignKey("items.id", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column("unit_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False),
        sa.CheckConstraint("unit_price >= 0", name="ck_unit_price_non_negative"),
        sa.CheckConstraint("quantity >= 1", name="ck_quantity_at_least_one"),
    )
    op.create_index("ix_sold_items_item_id", "sold_items", ["item_id"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index("ix_sold_items_item_id", table_name="sold_items")
    op.drop_table("sold_items")

    op.drop_index("ix_sales_sale_date", table_name="sales")
    op.drop_index("ix_sales_customer_id", table_name="sales")
    op.drop_index("ix_sales_id", table_name="sales")
    op.drop_table("sales")

    op.drop_index("ix_customers_email", table_name="customers")
    op.drop_index("ix_customers_id", table_name="customers")
    op.drop_table("customers")

    op.drop_index("ix_items_status", table_name="items")
    op.drop_index("ix_items_event_id", table_name="items")
    op.drop_index("ix_items_id", table_name="items")
    op.drop_table("items")

    op.drop_index("ix_estate_sale_events_id", table_name="estate_sale_events")
    op.drop_table("estate_sale_events")
