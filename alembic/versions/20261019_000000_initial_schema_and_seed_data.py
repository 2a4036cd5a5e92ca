"""Initial schema and seed data for FunShop

Revision ID: 20261019_000000
Revises: None
Create Date: 2026-10-19 00:00:00.000000

This is the initial migration that creates every storefront table and seeds
the default product categories:
- Accounts and profiles (users, account_infos, sellers)
- Catalogue (categories, products, reviews)
- Purchasing (cart_items, orders, addresses, payment_methods)
- Watch lists (observed_products)

The administrator account is not created here; the server creates it on
startup from the ADMIN_* settings so the password hash never lives in a
migration.

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261019_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DEFAULT_CATEGORIES = (
    "Books",
    "Clothing",
    "Collectibles",
    "Electronics",
    "Home",
    "Music",
    "Sports",
    "Toys",
    "Video Games",
    "Other",
)


def _user_fk(nullable: bool = False, ondelete: str = "CASCADE", unique: bool = False) -> sa.Column:
    return sa.Column(
        "user_id",
        sa.Integer(),
        sa.ForeignKey("users.id", ondelete=ondelete),
        nullable=nullable,
        unique=unique,
        index=True,
    )


def _product_fk(nullable: bool = False, ondelete: str = "CASCADE") -> sa.Column:
    return sa.Column(
        "product_id",
        sa.Integer(),
        sa.ForeignKey("products.id", ondelete=ondelete),
        nullable=nullable,
        index=True,
    )


def upgrade() -> None:
    """Create all tables and seed initial data."""

    # Create users table
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(64), nullable=False),
        sa.Column("first_name", sa.String(128), nullable=False),
        sa.Column("last_name", sa.String(128), nullable=False),
        sa.Column("birth_date", sa.Date(), nullable=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("account_type", sa.String(16), nullable=False, server_default="customer"),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column("password_reset_token", sa.String(128), nullable=True),
        sa.Column("password_reset_expires", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_password_reset_token", "users", ["password_reset_token"])

    # Create account_infos table
    op.create_table(
        "account_infos",
        sa.Column("id", sa.Integer(), primary_key=True),
        _user_fk(unique=True),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("profile_image", sa.String(512), nullable=True),
    )

    # Create categories table
    categories = op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(128), nullable=False, unique=True),
    )

    # Create products table
    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("condition", sa.String(64), nullable=True),
        sa.Column("category", sa.String(128), nullable=True),
        sa.Column("image_path", sa.String(512), nullable=True),
        sa.Column("price", sa.Float(), nullable=True),
        sa.Column("discounted_price", sa.Float(), nullable=True),
        sa.Column("auction_price", sa.Float(), nullable=True),
        sa.Column("status", sa.String(16), nullable=False, server_default="available"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        _user_fk(),
    )
    op.create_index("ix_products_name", "products", ["name"])
    op.create_index("ix_products_status", "products", ["status"])

    # Create cart_items table
    op.create_table(
        "cart_items",
        sa.Column("id", sa.Integer(), primary_key=True),
        _user_fk(),
        _product_fk(),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default="1"),
        sa.UniqueConstraint("user_id", "product_id", name="uq_cart_items_user_product"),
    )

    # Create orders table; rows survive deleted users and products
    op.create_table(
        "orders",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("ordered_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("total", sa.Float(), nullable=False),
        sa.Column("status", sa.String(16), nullable=False, server_default="confirmed"),
        _user_fk(nullable=True, ondelete="SET NULL"),
        _product_fk(nullable=True, ondelete="SET NULL"),
    )
    op.create_index("ix_orders_ordered_at", "orders", ["ordered_at"])

    # Create addresses table
    op.create_table(
        "addresses",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("street", sa.String(255), nullable=False),
        sa.Column("city", sa.String(128), nullable=False),
        sa.Column("postal_code", sa.String(16), nullable=False),
        _user_fk(),
    )

    # Create payment_methods table (masked cards only)
    op.create_table(
        "payment_methods",
        sa.Column("id", sa.Integer(), primary_key=True),
        _user_fk(),
        sa.Column("holder_name", sa.String(255), nullable=False),
        sa.Column("card_last4", sa.String(4), nullable=False),
        sa.Column("expiry_date", sa.String(7), nullable=False),
    )

    # Create observed_products table
    op.create_table(
        "observed_products",
        sa.Column("id", sa.Integer(), primary_key=True),
        _user_fk(),
        _product_fk(),
        sa.Column("observed_price", sa.Float(), nullable=True),
        sa.Column("notification_read", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("user_id", "product_id", name="uq_observed_products_user_product"),
    )

    # Create reviews table
    op.create_table(
        "reviews",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("content", sa.String(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        _product_fk(),
        _user_fk(),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_reviews_rating"),
    )
    op.create_index("ix_reviews_created_at", "reviews", ["created_at"])

    # Create sellers table
    op.create_table(
        "sellers",
        sa.Column("id", sa.Integer(), primary_key=True),
        _user_fk(unique=True),
        sa.Column("shop_name", sa.String(255), nullable=False),
        sa.Column("vat_number", sa.String(32), nullable=False, unique=True),
        sa.Column("contact_email", sa.String(255), nullable=False),
        sa.Column("iban", sa.String(34), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )

    # Seed default categories
    op.bulk_insert(categories, [{"name": name} for name in DEFAULT_CATEGORIES])


def downgrade() -> None:
    """Drop all tables created in upgrade."""
    op.drop_table("sellers")
    op.drop_table("reviews")
    op.drop_table("observed_products")
    op.drop_table("payment_methods")
    op.drop_table("addresses")
    op.drop_table("orders")
    op.drop_table("cart_items")
    op.drop_table("products")
    op.drop_table("categories")
    op.drop_table("account_infos")
    op.drop_table("users")
