"""Application service: Delete Product use case."""

from __future__ import annotations

import logging

from catalog.application.image_cleanup import discard_image
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.image_store import ImageStore
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository, image_store: ImageStore) -> None:
        self._product_repo = product_repo
        self._image_store = image_store

    def handle(self, product_id: str) -> str:
        """Delete a product and, best-effort, its image file.

        The document goes first: a crash in between leaves an orphaned
        file rather than a product pointing at a missing image.
        """
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if not self._product_repo.delete_by_id(product_id):
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if product.image:
            discard_image(self._image_store, product.image)

        logger.info("Deleted product %s", product_id)
        return "Product deleted"
