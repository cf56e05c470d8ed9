"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import ImageUpload, ProductDTO, ProductFields, to_dto
from catalog.application.image_cleanup import discard_image
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.image_store import ImageStore
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository, image_store: ImageStore) -> None:
        self._product_repo = product_repo
        self._image_store = image_store

    def handle(
        self,
        product_id: str,
        fields: ProductFields,
        image: ImageUpload | None = None,
    ) -> ProductDTO:
        """Apply a partial update, optionally replacing the image.

        The old image is only removed once the document points at the
        new one, and a failure to remove it is logged, not raised.
        """
        existing = self._product_repo.find_by_id(product_id)
        if existing is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        changes = fields.to_changes()
        existing.apply_changes(changes)  # validate before any write

        new_image = None
        if image is not None and image.filename:
            new_image = self._image_store.save(image.filename, image.stream)
            changes["image"] = new_image

        if not changes:
            return to_dto(existing)

        try:
            updated = self._product_repo.update_by_id(product_id, changes)
        except Exception:
            if new_image:
                self._image_store.delete(new_image)
            raise

        if updated is None:
            # Deleted between the lookup and the update.
            if new_image:
                self._image_store.delete(new_image)
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        if new_image and existing.image != new_image:
            discard_image(self._image_store, existing.image)

        logger.info("Updated product %s (%s)", product_id, ", ".join(sorted(changes)))
        return to_dto(updated)

