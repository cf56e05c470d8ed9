"""Document mapping tests for the MongoDB repository.

These never open a connection; they cover the translation between
stored documents and the Product aggregate.
"""

from datetime import datetime, timezone

from bson import ObjectId

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.infrastructure.persistence.mongo_product_repository import MongoProductRepository


def test_document_round_trip_keeps_fields():
    product = Product.create(
        name="Mug", description="desc", price=Money.of("9.99"),
        category="home", image="mug.png", stock=10, rating=4.5,
    )
    doc = MongoProductRepository._to_document(product)
    assert doc["price"] == 9.99
    assert doc["createdAt"] == product.created_at
    assert "_id" not in doc

    oid = ObjectId()
    restored = MongoProductRepository._to_domain({**doc, "_id": oid})
    assert restored.id == str(oid)
    assert restored.price == Money.of("9.99")
    assert restored.stock == 10


def test_naive_timestamps_are_read_as_utc():
    doc = {
        "_id": ObjectId(), "name": "Mug", "description": "desc", "price": 1,
        "category": "home", "image": "mug.png", "createdAt": datetime(2024, 1, 1, 12, 0),
    }
    product = MongoProductRepository._to_domain(doc)
    assert product.created_at.tzinfo == timezone.utc
    assert product.stock == 0
    assert product.rating == 0.0


def test_money_changes_are_stored_as_numbers():
    changes = MongoProductRepository._changes_to_document({"price": Money.of("2.50"), "stock": 3})
    assert changes == {"price": 2.5, "stock": 3}


def test_invalid_object_id_is_not_found_without_querying():
    repo = MongoProductRepository(collection=None)  # type: ignore[arg-type]
    assert repo.find_by_id("not-an-object-id") is None
    assert repo.update_by_id("not-an-object-id", {"stock": 1}) is None
    assert repo.delete_by_id("not-an-object-id") is False
