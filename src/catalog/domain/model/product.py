"""Product aggregate.

The only entity in the catalog. A product always points at one image file
in the image store; the document and the file are kept in step by the
application handlers, not by the aggregate itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import Money

# Fields a caller may change through an update. ``id`` and ``created_at``
# are owned by the store and never appear here.
MUTABLE_FIELDS = ("name", "description", "price", "category", "image", "stock", "rating")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """A product in the catalog.

    Use ``Product.create()`` for new products; it enforces every field
    rule.  The plain constructor is kept simple so repositories can
    reconstitute stored documents without re-validating them.
    """

    id: str | None
    name: str
    description: str
    price: Money
    category: str
    image: str
    stock: int = 0
    rating: float = 0.0
    created_at: datetime = field(default_factory=_utcnow)

    # --- Factory (used for NEW products only) --------------------------------

    @staticmethod
    def create(
        name: str,
        description: str,
        price: Money,
        category: str,
        image: str,
        stock: int = 0,
        rating: float = 0.0,
    ) -> Product:
        """Build a new, not yet persisted product."""
        return Product(
            id=None,
            name=_require_text("name", name),
            description=_require_text("description", description),
            price=price,
            category=_require_text("category", category),
            image=_require_text("image", image),
            stock=_check_stock(stock),
            rating=_check_rating(rating),
        )

    # --- Mutation -------------------------------------------------------------

    def apply_changes(self, changes: dict[str, Any]) -> Product:
        """Return a copy with *changes* applied, validating each field.

        Keys outside ``MUTABLE_FIELDS`` are rejected so callers cannot
        rewrite the id or the creation timestamp.
        """
        unknown = set(changes) - set(MUTABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Cannot update field(s): {', '.join(sorted(unknown))}")

        checked: dict[str, Any] = {}
        for key, value in changes.items():
            if key in ("name", "description", "category", "image"):
                checked[key] = _require_text(key, value)
            elif key == "price":
                if not isinstance(value, Money):
                    raise ValidationError("Price must be a Money value")
                checked[key] = value
            elif key == "stock":
                checked[key] = _check_stock(value)
            elif key == "rating":
                checked[key] = _check_rating(value)
        return replace(self, **checked)


def _require_text(field_name: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"Product {field_name} is required")
    return value.strip()


def _check_stock(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Stock must be an integer, got {value!r}")
    if value < 0:
        raise ValidationError("Stock cannot be negative")
    return value


def _check_rating(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"Rating must be a number, got {value!r}")
    return float(value)
