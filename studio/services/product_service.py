"""
Product service.

Store products have no stock: a purchase only records the product on the
buyer, once.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

from studio.schemas.product import Product
from studio.schemas.result import OperationResult
from studio.schemas.user import User

logger = logging.getLogger(__name__)


def parse_price(value: Any) -> Optional[float]:
    """Finite price >= 0, or None when *value* is not one."""
    if isinstance(value, bool):
        return None
    try:
        price = float(str(value).strip())
    except (TypeError, ValueError):
        return None
    if math.isnan(price) or math.isinf(price) or price < 0:
        return None
    return price


def create_product(products: list[Product], name: str, price: Any,
                   description: str = "") -> tuple[list[Product], OperationResult]:
    if not name:
        return products, OperationResult.fail("Product name is required")
    parsed = parse_price(price)
    if parsed is None:
        return products, OperationResult.fail("Price must be a non-negative number")
    product = Product(name=name, price=parsed, description=description or "")
    return [*products, product], OperationResult.ok("Product created", record_id=product.id)


def purchase_product(products: list[Product], users: list[User], product_id: str,
                     user_id: str) -> tuple[list[User], OperationResult]:
    """Record *product_id* on the buyer. Buying the same product twice is a no-op."""
    if not any(p.id == product_id for p in products):
        return users, OperationResult.fail("Product not found")
    user = next((u for u in users if u.id == user_id), None)
    if not user:
        return users, OperationResult.fail("User not found")
    if product_id in user.purchased_products:
        return users, OperationResult.ok("Already purchased", record_id=product_id)

    bought = user.model_copy(update={"purchased_products": [*user.purchased_products, product_id]})
    logger.info(f"User {user_id} purchased product {product_id}")
    return [bought if u.id == user_id else u for u in users], OperationResult.ok("Purchased", record_id=product_id)
