"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (MongoDB, JSON file, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product. No ordering is guaranteed."""

    @abstractmethod
    def find_by_category(self, category: str) -> list[Product]:
        """Return products whose category equals *category* exactly."""

    @abstractmethod
    def find_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def insert(self, product: Product) -> Product:
        """Persist a new product and return it with its generated ID."""

    @abstractmethod
    def update_by_id(self, product_id: str, changes: dict[str, Any]) -> Product | None:
        """Apply a partial update and return the stored result.

        *changes* holds already-validated domain values keyed by
        ``Product`` attribute name. Returns None if the ID does not
        resolve.
        """

    @abstractmethod
    def delete_by_id(self, product_id: str) -> bool:
        """Delete a product. Returns False if the ID did not resolve."""

    def count(self) -> int:
        return len(self.find_all())
