"""
Product Service.

Listing and editing products. Edits that change the effective price flag
every watcher of the product so that the change shows up in their
notifications.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from funshop.core.database.entities.products import Product
from funshop.core.database.entities.users import User
from funshop.core.database.repositories.bundle import RepositoryBundle
from funshop.core.errors import NotFound
from funshop.core.logging_config import get_logger
from funshop.core.models.io.products import ProductCreate, ProductRead

logger = get_logger(__name__)


def to_product_read(product: Product, seller_username: Optional[str] = None) -> ProductRead:
    read = ProductRead.model_validate(product)
    read.seller_username = seller_username
    return read


async def create_product(repos: RepositoryBundle, seller: User, data: ProductCreate) -> Product:
    product = Product(
        name=data.name.strip(),
        description=data.description,
        condition=data.condition,
        category=data.category,
        image_path=data.image_path,
        price=data.price,
        auction_price=data.auction_price,
        user_id=seller.id,
    )
    product = await repos.products.create(product)
    logger.info(f"Product {product.id} listed by user {seller.id}")
    return product


async def update_product(
    repos: RepositoryBundle,
    product_id: int,
    data: Dict[str, Any],
    owner_id: Optional[int] = None,
) -> Product:
    """Apply an edit and flag watchers when the effective price changes.

    Args:
        repos: Repository bundle of the request
        product_id: Product to edit
        data: Fields to change
        owner_id: Required owner, or None for an administrator edit

    Raises:
        NotFound: The product does not exist or is not owned by ``owner_id``
    """
    existing = await repos.products.get_by_id(product_id)
    if existing is None or (owner_id is not None and existing.user_id != owner_id):
        raise NotFound("Product not found.")
    old_price = existing.effective_price
    try:
        product = await repos.products.update(product_id, data, user_id=owner_id, commit=False)
        if product.effective_price != old_price:
            flagged = await repos.observed.flag_change(product_id, commit=False)
            logger.info(f"Price of product {product_id} changed, {flagged} watcher(s) flagged")
        await repos.session.commit()
    except Exception:
        await repos.session.rollback()
        raise
    await repos.session.refresh(product)
    return product


async def delete_product(repos: RepositoryBundle, product_id: int, owner_id: Optional[int] = None) -> None:
    if not await repos.products.delete(product_id, user_id=owner_id):
        raise NotFound("Product not found.")
    logger.info(f"Product {product_id} deleted")
