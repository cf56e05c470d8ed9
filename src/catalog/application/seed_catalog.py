"""Application service: seed an empty catalog with sample products."""

from __future__ import annotations

import logging

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

# (name, description, price, category, stock, rating, image)
SAMPLE_PRODUCTS = [
    ("Wireless Headphones", "High-quality wireless headphones with noise cancellation.",
     "149.99", "electronics", 50, 4.5, "headphones.jpg"),
    ("Smart Watch", "Track your fitness and stay connected with this sleek smart watch.",
     "199.99", "electronics", 30, 4.2, "smartwatch.jpg"),
    ("Cotton T-Shirt", "Comfortable 100% cotton t-shirt available in multiple colors.",
     "19.99", "clothing", 100, 4.0, "tshirt.jpg"),
    ("Denim Jeans", "Classic denim jeans with a modern fit.",
     "59.99", "clothing", 75, 4.3, "jeans.jpg"),
    ("Coffee Maker", "Programmable coffee maker for the perfect morning brew.",
     "89.99", "home", 25, 4.7, "coffeemaker.jpg"),
    ("Blender", "High-powered blender for smoothies and more.",
     "79.99", "home", 20, 4.1, "blender.jpg"),
    ("Wireless Earbuds", "Compact wireless earbuds with amazing sound quality.",
     "129.99", "electronics", 40, 4.6, "earbuds.jpg"),
    ("Running Shoes", "Lightweight and comfortable running shoes for all terrains.",
     "89.99", "clothing", 60, 4.4, "shoes.jpg"),
]


class SeedCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> int:
        """Insert the sample products if the catalog is empty.

        Returns the number of products inserted. The sample image files
        are not shipped; they must be copied into the upload directory.
        """
        if self._product_repo.count() > 0:
            logger.info("Catalog already has products, skipping seed")
            return 0

        for name, description, price, category, stock, rating, image in SAMPLE_PRODUCTS:
            self._product_repo.insert(
                Product.create(
                    name=name,
                    description=description,
                    price=Money.of(price),
                    category=category,
                    image=image,
                    stock=stock,
                    rating=rating,
                )
            )
        logger.info("Seeded catalog with %d products", len(SAMPLE_PRODUCTS))
        return len(SAMPLE_PRODUCTS)
