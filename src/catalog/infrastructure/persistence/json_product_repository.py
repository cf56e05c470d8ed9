"""JSON-file-backed implementation of ProductRepository.

Handy for local development without a MongoDB server. The whole file is
rewritten on every change, so it is only suitable for small catalogs.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from pathlib import Path
from typing import Any

from catalog.domain.exceptions import StoreError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def find_all(self) -> list[Product]:
        return list(self._load().values())

    def find_by_category(self, category: str) -> list[Product]:
        return [p for p in self._load().values() if p.category == category]

    def find_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def insert(self, product: Product) -> Product:
        products = self._load()
        saved = replace(product, id=uuid.uuid4().hex)
        products[saved.id] = saved
        self._persist(products)
        return saved

    def update_by_id(self, product_id: str, changes: dict[str, Any]) -> Product | None:
        products = self._load()
        current = products.get(product_id)
        if current is None:
            return None
        updated = replace(current, **changes)
        products[product_id] = updated
        self._persist(products)
        return updated

    def delete_by_id(self, product_id: str) -> bool:
        products = self._load()
        if products.pop(product_id, None) is None:
            return False
        self._persist(products)
        return True

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StoreError(f"Cannot read {self._file_path}: {exc}") from exc
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                description=item["description"],
                price=Money(Decimal(item["price"])),
                category=item["category"],
                image=item["image"],
                stock=item.get("stock", 0),
                rating=item.get("rating", 0.0),
                created_at=datetime.fromisoformat(item["created_at"]),
            )
            for item in raw
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "description": p.description,
                "price": str(p.price.amount),
                "category": p.category,
                "image": p.image,
                "stock": p.stock,
                "rating": p.rating,
                "created_at": p.created_at.isoformat(),
            }
            for p in products.values()
        ]
        try:
            self._file_path.write_text(json.dumps(raw, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"Cannot write {self._file_path}: {exc}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
