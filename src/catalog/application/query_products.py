"""Application services: read-only product and image queries."""

from __future__ import annotations

from pathlib import Path

from catalog.application.dto import ProductDTO, to_dto
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.image_store import ImageStore
from catalog.domain.repository.product_repository import ProductRepository


class ListProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, category: str | None = None) -> list[ProductDTO]:
        """List every product, or only those in *category* (exact match)."""
        if category is None:
            products = self._product_repo.find_all()
        else:
            products = self._product_repo.find_by_category(category)
        return [to_dto(p) for p in products]


class GetProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.find_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return to_dto(product)


class GetImageHandler:

    def __init__(self, image_store: ImageStore) -> None:
        self._image_store = image_store

    def handle(self, name: str) -> Path:
        return self._image_store.path_for(name)
