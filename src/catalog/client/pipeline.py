"""Pure filter / sort / paginate functions over ``CatalogState``."""

from __future__ import annotations

import locale
import math
from dataclasses import dataclass, replace
from typing import Iterable

from catalog.client.state import (
    PRODUCTS_PER_PAGE,
    CatalogItem,
    CatalogState,
    FilterCriteria,
    SortOrder,
)

EXCERPT_LENGTH = 60


@dataclass(frozen=True)
class PageButton:
    number: int
    current: bool


@dataclass(frozen=True)
class Pagination:
    """Controls for a result set spanning more than one page."""

    buttons: tuple[PageButton, ...]
    previous_enabled: bool
    next_enabled: bool


# --- Filtering ------------------------------------------------------------------


def matches_category(item: CatalogItem, category: str) -> bool:
    return not category or item.category == category


def matches_search(item: CatalogItem, search: str) -> bool:
    needle = search.lower()
    if not needle:
        return True
    return needle in item.name.lower() or needle in item.description.lower()


def filter_products(
    products: Iterable[CatalogItem], criteria: FilterCriteria
) -> list[CatalogItem]:
    return [
        item
        for item in products
        if matches_category(item, criteria.category) and matches_search(item, criteria.search)
    ]


def sort_products(products: list[CatalogItem], order: SortOrder) -> list[CatalogItem]:
    """Sort by the requested key. ``SortOrder.NONE`` keeps the given order."""
    if order is SortOrder.PRICE_ASC:
        return sorted(products, key=lambda item: item.price)
    if order is SortOrder.PRICE_DESC:
        return sorted(products, key=lambda item: item.price, reverse=True)
    if order is SortOrder.NAME_ASC:
        return sorted(products, key=name_sort_key)
    if order is SortOrder.NAME_DESC:
        return sorted(products, key=name_sort_key, reverse=True)
    return list(products)


def name_sort_key(item: CatalogItem) -> tuple[str, str]:
    """Collate by the active LC_COLLATE, ignoring case first, then by case."""
    return locale.strxfrm(item.name.casefold()), locale.strxfrm(item.name)


# --- State transitions ----------------------------------------------------------


def apply_criteria(state: CatalogState, criteria: FilterCriteria) -> CatalogState:
    """Recompute the filtered sequence from scratch and go back to page 1."""
    filtered = sort_products(filter_products(state.all_products, criteria), criteria.sort)
    return replace(state, criteria=criteria, filtered_products=tuple(filtered), current_page=1)


def go_to_page(state: CatalogState, page: int) -> CatalogState:
    """Move to *page*, clamped to the available range. No refiltering."""
    last = max(page_count(len(state.filtered_products)), 1)
    return replace(state, current_page=min(max(page, 1), last))


# --- Views ----------------------------------------------------------------------


def page_count(total: int) -> int:
    return math.ceil(total / PRODUCTS_PER_PAGE)


def page_window(state: CatalogState) -> tuple[CatalogItem, ...]:
    start = (state.current_page - 1) * PRODUCTS_PER_PAGE
    return state.filtered_products[start:start + PRODUCTS_PER_PAGE]


def pagination_controls(state: CatalogState) -> Pagination | None:
    """Return the pagination controls, or None for a single page."""
    pages = page_count(len(state.filtered_products))
    if pages <= 1:
        return None
    return Pagination(
        buttons=tuple(PageButton(n, n == state.current_page) for n in range(1, pages + 1)),
        previous_enabled=state.current_page > 1,
        next_enabled=state.current_page < pages,
    )


def categories(products: Iterable[CatalogItem]) -> list[str]:
    """Distinct categories, for the category selector."""
    return sorted({item.category for item in products if item.category})


def excerpt(text: str, length: int = EXCERPT_LENGTH) -> str:
    return text if len(text) <= length else text[:length] + "..."
