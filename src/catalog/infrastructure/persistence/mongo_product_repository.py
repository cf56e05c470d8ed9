"""MongoDB-backed implementation of ProductRepository (pymongo)."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Iterator

from bson import ObjectId
from pymongo import MongoClient, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from catalog.domain.exceptions import StoreError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

DEFAULT_DATABASE = "ecommerce"
COLLECTION = "products"


class MongoProductRepository(ProductRepository):

    def __init__(self, collection: Collection) -> None:
        self._collection = collection

    @classmethod
    def from_url(cls, url: str) -> MongoProductRepository:
        """Build a repository for the ``products`` collection at *url*.

        The client connects lazily, so a server that is down surfaces as a
        StoreError on the first query rather than here.
        """
        client: MongoClient = MongoClient(url, tz_aware=True, serverSelectionTimeoutMS=5000)
        database = client.get_default_database(default=DEFAULT_DATABASE)
        logger.info("Using MongoDB database %r", database.name)
        return cls(database[COLLECTION])

    # --- ProductRepository interface ------------------------------------------

    def find_all(self) -> list[Product]:
        with _store_errors():
            return [self._to_domain(doc) for doc in self._collection.find()]

    def find_by_category(self, category: str) -> list[Product]:
        with _store_errors():
            return [self._to_domain(doc) for doc in self._collection.find({"category": category})]

    def find_by_id(self, product_id: str) -> Product | None:
        if not ObjectId.is_valid(product_id):
            return None
        with _store_errors():
            doc = self._collection.find_one({"_id": ObjectId(product_id)})
        return self._to_domain(doc) if doc is not None else None

    def insert(self, product: Product) -> Product:
        with _store_errors():
            result = self._collection.insert_one(self._to_document(product))
        return replace(product, id=str(result.inserted_id))

    def update_by_id(self, product_id: str, changes: dict[str, Any]) -> Product | None:
        if not ObjectId.is_valid(product_id):
            return None
        with _store_errors():
            doc = self._collection.find_one_and_update(
                {"_id": ObjectId(product_id)},
                {"$set": self._changes_to_document(changes)},
                return_document=ReturnDocument.AFTER,
            )
        return self._to_domain(doc) if doc is not None else None

    def delete_by_id(self, product_id: str) -> bool:
        if not ObjectId.is_valid(product_id):
            return False
        with _store_errors():
            result = self._collection.delete_one({"_id": ObjectId(product_id)})
        return result.deleted_count == 1

    def count(self) -> int:
        with _store_errors():
            return self._collection.count_documents({})

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_document(product: Product) -> dict[str, Any]:
        return {
            "name": product.name,
            "description": product.description,
            "price": float(product.price),
            "category": product.category,
            "image": product.image,
            "stock": product.stock,
            "rating": product.rating,
            "createdAt": product.created_at,
        }

    @staticmethod
    def _changes_to_document(changes: dict[str, Any]) -> dict[str, Any]:
        return {
            key: float(value) if isinstance(value, Money) else value
            for key, value in changes.items()
        }

    @staticmethod
    def _to_domain(doc: dict[str, Any]) -> Product:
        created_at = doc.get("createdAt") or datetime.now(timezone.utc)
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        return Product(
            id=str(doc["_id"]),
            name=doc["name"],
            description=doc["description"],
            price=Money.of(doc["price"]),
            category=doc["category"],
            image=doc["image"],
            stock=int(doc.get("stock", 0)),
            rating=float(doc.get("rating", 0)),
            created_at=created_at,
        )


@contextmanager
def _store_errors() -> Iterator[None]:
    try:
        yield
    except PyMongoError as exc:
        raise StoreError(f"Product store error: {exc}") from exc
