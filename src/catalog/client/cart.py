"""Add-to-cart placeholder. There is no cart service behind it."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def add_to_cart(product_id: str) -> str:
    logger.info("Product added to cart: %s", product_id)
    return "Product added to cart!"
