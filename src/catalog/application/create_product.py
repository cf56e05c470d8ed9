"""Application service: Create Product use case.

The image is written before the document. If the document cannot be
stored the freshly written image is removed again, so a failed create
never leaves an orphaned file behind.
"""

from __future__ import annotations

import logging

from catalog.application.dto import ImageUpload, ProductDTO, ProductFields, to_dto
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.repository.image_store import ImageStore
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "description", "price", "category")


class CreateProductHandler:

    def __init__(self, product_repo: ProductRepository, image_store: ImageStore) -> None:
        self._product_repo = product_repo
        self._image_store = image_store

    def handle(self, fields: ProductFields, image: ImageUpload | None) -> ProductDTO:
        """Add a new product to the catalog.

        Steps:
        1. Reject the request if no image was attached.
        2. Validate every field before touching the image store.
        3. Store the image, then insert the document.
        """
        if image is None or not image.filename:
            raise ValidationError("Image file is required")

        changes = fields.to_changes()
        missing = [name for name in REQUIRED_FIELDS if name not in changes]
        if missing:
            raise ValidationError(f"Product {missing[0]} is required")

        product = Product.create(
            name=changes["name"],
            description=changes["description"],
            price=changes["price"],
            category=changes["category"],
            image=image.filename,
            stock=changes.get("stock", 0),
            rating=changes.get("rating", 0.0),
        )

        stored_name = self._image_store.save(image.filename, image.stream)
        product = product.apply_changes({"image": stored_name})
        try:
            saved = self._product_repo.insert(product)
        except Exception:
            self._image_store.delete(stored_name)
            raise

        logger.info("Created product %s (image %s)", saved.id, stored_name)
        return to_dto(saved)
