"""Catalog Client state.

The client fetches the whole catalog once. Everything after that (filter,
sort, paginate) is a pure function from one ``CatalogState`` to the next,
so it can be exercised without a terminal or a server.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

PRODUCTS_PER_PAGE = 8


class SortOrder(Enum):
    NONE = ""
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"
    NAME_ASC = "name_asc"
    NAME_DESC = "name_desc"


@dataclass(frozen=True)
class CatalogItem:
    """A product as received from the API."""

    id: str
    name: str
    description: str
    price: float
    category: str
    image: str
    stock: int = 0
    rating: float = 0.0

    @staticmethod
    def from_json(data: dict[str, Any]) -> CatalogItem:
        return CatalogItem(
            id=str(data.get("id") or data.get("_id")),
            name=data["name"],
            description=data.get("description", ""),
            price=float(data["price"]),
            category=data.get("category", ""),
            image=data.get("image", ""),
            stock=int(data.get("stock", 0)),
            rating=float(data.get("rating", 0)),
        )


@dataclass(frozen=True)
class FilterCriteria:
    """What the user selected. Empty strings mean "no filter"."""

    category: str = ""
    search: str = ""
    sort: SortOrder = SortOrder.NONE


@dataclass(frozen=True)
class CatalogState:
    all_products: tuple[CatalogItem, ...]
    filtered_products: tuple[CatalogItem, ...]
    criteria: FilterCriteria = FilterCriteria()
    current_page: int = 1

    @staticmethod
    def loaded(products: list[CatalogItem]) -> CatalogState:
        """State right after the initial fetch: nothing filtered, page 1."""
        items = tuple(products)
        return CatalogState(all_products=items, filtered_products=items)
