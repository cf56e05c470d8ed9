"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the HTTP/CLI layers and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, BinaryIO, Mapping

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money


@dataclass(frozen=True)
class ImageUpload:
    """Input: an uploaded image file as received from the client."""

    filename: str
    stream: BinaryIO


@dataclass(frozen=True)
class ProductFields:
    """Input: product fields as submitted, usually raw form strings.

    ``None`` means "not supplied". Blank ``stock``/``rating`` values are
    treated as not supplied, so a create falls back to the defaults.
    """

    name: str | None = None
    description: str | None = None
    price: str | float | None = None
    category: str | None = None
    stock: str | int | None = None
    rating: str | float | None = None

    @staticmethod
    def from_mapping(data: Mapping[str, Any]) -> ProductFields:
        known = {f.name for f in fields(ProductFields)}
        return ProductFields(**{k: data.get(k) for k in known if data.get(k) is not None})

    def to_changes(self) -> dict[str, Any]:
        """Convert supplied fields into validated-type domain values."""
        changes: dict[str, Any] = {}
        for key in ("name", "description", "category"):
            value = getattr(self, key)
            if value is not None:
                changes[key] = value
        if self.price is not None:
            changes["price"] = Money.of(self.price)
        if not _blank(self.stock):
            changes["stock"] = _to_int("Stock", self.stock)
        if not _blank(self.rating):
            changes["rating"] = _to_float("Rating", self.rating)
        return changes


@dataclass(frozen=True)
class ProductDTO:
    """Output: a product as returned to API and CLI callers."""

    id: str
    name: str
    description: str
    price: float
    category: str
    image: str
    stock: int
    rating: float
    created_at: str  # ISO-8601, UTC

    def to_json(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "image": self.image,
            "stock": self.stock,
            "rating": self.rating,
            "createdAt": self.created_at,
        }


def to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,  # type: ignore[arg-type]
        name=product.name,
        description=product.description,
        price=float(product.price),
        category=product.category,
        image=product.image,
        stock=product.stock,
        rating=product.rating,
        created_at=product.created_at.isoformat(),
    )


# --- Parsing helpers ----------------------------------------------------------


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _to_int(label: str, value: Any) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    try:
        return int(str(value).strip())
    except ValueError as exc:
        raise ValidationError(f"{label} must be an integer, got {value!r}") from exc


def _to_float(label: str, value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    try:
        return float(str(value).strip())
    except ValueError as exc:
        raise ValidationError(f"{label} must be a number, got {value!r}") from exc
