"""Unit tests for the client-side filter / sort / paginate pipeline."""

import pytest

from catalog.client.pipeline import (
    apply_criteria,
    categories,
    excerpt,
    filter_products,
    go_to_page,
    page_count,
    page_window,
    pagination_controls,
    sort_products,
)
from catalog.client.state import (
    PRODUCTS_PER_PAGE,
    CatalogItem,
    CatalogState,
    FilterCriteria,
    SortOrder,
)


def _item(n: int, name: str | None = None, category: str = "home", price: float | None = None,
          description: str = "") -> CatalogItem:
    return CatalogItem(
        id=str(n),
        name=name or f"item {n:02d}",
        description=description or f"description {n}",
        price=price if price is not None else float(n),
        category=category,
        image=f"{n}.png",
    )


CATALOG = [
    _item(1, "Wireless Headphones", "electronics", 149.99, "Noise cancellation"),
    _item(2, "Smart Watch", "electronics", 199.99, "Track your fitness"),
    _item(3, "Cotton T-Shirt", "clothing", 19.99, "100% cotton"),
    _item(4, "Coffee Maker", "home", 89.99, "Programmable COFFEE maker"),
    _item(5, "Blender", "home", 79.99, "Smoothies and more"),
]


def _state(products=CATALOG) -> CatalogState:
    return CatalogState.loaded(list(products))


# ── Filtering ────────────────────────────────────────────────────────────────


class TestFiltering:

    def test_no_criteria_keeps_everything_in_order(self):
        assert filter_products(CATALOG, FilterCriteria()) == CATALOG

    @pytest.mark.parametrize("category", ["electronics", "clothing", "home", "garden"])
    def test_category_subset_is_exact(self, category):
        result = filter_products(CATALOG, FilterCriteria(category=category))
        assert result == [p for p in CATALOG if p.category == category]

    def test_search_matches_name_or_description(self):
        result = filter_products(CATALOG, FilterCriteria(search="cotton"))
        assert [p.id for p in result] == ["3"]
        result = filter_products(CATALOG, FilterCriteria(search="smoothies"))
        assert [p.id for p in result] == ["5"]

    @pytest.mark.parametrize("term", ["coffee", "COFFEE", "CoFfEe"])
    def test_search_is_case_insensitive(self, term):
        lower = filter_products(CATALOG, FilterCriteria(search="coffee"))
        assert filter_products(CATALOG, FilterCriteria(search=term)) == lower

    def test_category_and_search_combine_with_and(self):
        result = filter_products(CATALOG, FilterCriteria(category="home", search="watch"))
        assert result == []
        result = filter_products(CATALOG, FilterCriteria(category="electronics", search="watch"))
        assert [p.name for p in result] == ["Smart Watch"]


# ── Sorting ──────────────────────────────────────────────────────────────────


class TestSorting:

    def test_price_ascending(self):
        prices = [p.price for p in sort_products(CATALOG, SortOrder.PRICE_ASC)]
        assert all(a <= b for a, b in zip(prices, prices[1:]))

    def test_price_descending(self):
        prices = [p.price for p in sort_products(CATALOG, SortOrder.PRICE_DESC)]
        assert all(a >= b for a, b in zip(prices, prices[1:]))

    def test_name_ascending_and_descending(self):
        ascending = [p.name for p in sort_products(CATALOG, SortOrder.NAME_ASC)]
        assert ascending == [
            "Blender", "Coffee Maker", "Cotton T-Shirt", "Smart Watch", "Wireless Headphones",
        ]
        descending = [p.name for p in sort_products(CATALOG, SortOrder.NAME_DESC)]
        assert descending == list(reversed(ascending))

    def test_name_sort_ignores_letter_case(self):
        products = [_item(1, "banana"), _item(2, "Apple"), _item(3, "apple"), _item(4, "Cherry")]
        names = [p.name for p in sort_products(products, SortOrder.NAME_ASC)]
        assert [n.casefold() for n in names] == ["apple", "apple", "banana", "cherry"]
        assert set(names[:2]) == {"Apple", "apple"}

        descending = [p.name for p in sort_products(products, SortOrder.NAME_DESC)]
        assert [n.casefold() for n in descending] == ["cherry", "banana", "apple", "apple"]

    def test_no_sort_keeps_order(self):
        assert sort_products(CATALOG, SortOrder.NONE) == CATALOG

    def test_input_is_not_mutated(self):
        products = list(CATALOG)
        sort_products(products, SortOrder.PRICE_DESC)
        assert products == CATALOG


# ── State transitions ────────────────────────────────────────────────────────


class TestStateTransitions:

    def test_loaded_state(self):
        state = _state()
        assert state.current_page == 1
        assert state.filtered_products == tuple(CATALOG)

    def test_apply_criteria_resets_page(self):
        state = go_to_page(_state([_item(n) for n in range(20)]), 3)
        assert state.current_page == 3
        state = apply_criteria(state, FilterCriteria(sort=SortOrder.PRICE_DESC))
        assert state.current_page == 1

    def test_apply_criteria_recomputes_from_all_products(self):
        state = apply_criteria(_state(), FilterCriteria(category="home"))
        state = apply_criteria(state, FilterCriteria(category="clothing"))
        assert [p.id for p in state.filtered_products] == ["3"]
        assert state.all_products == tuple(CATALOG)

    def test_page_change_does_not_refilter(self):
        state = apply_criteria(_state([_item(n) for n in range(20)]),
                               FilterCriteria(sort=SortOrder.PRICE_DESC))
        moved = go_to_page(state, 2)
        assert moved.filtered_products is state.filtered_products
        assert moved.criteria == state.criteria

    def test_go_to_page_is_clamped(self):
        state = _state([_item(n) for n in range(20)])
        assert go_to_page(state, 0).current_page == 1
        assert go_to_page(state, 99).current_page == 3
        assert go_to_page(_state([]), 5).current_page == 1


# ── Pagination ───────────────────────────────────────────────────────────────


class TestPagination:

    @pytest.mark.parametrize("total", [0, 1, 7, 8, 9, 16, 17, 23])
    def test_pages_reassemble_filtered_sequence(self, total):
        state = _state([_item(n) for n in range(total)])
        pages = [page_window(go_to_page(state, n)) for n in range(1, page_count(total) + 1)]

        assert [item for page in pages for item in page] == list(state.filtered_products)
        for page in pages[:-1]:
            assert len(page) == PRODUCTS_PER_PAGE

    def test_page_count(self):
        assert page_count(0) == 0
        assert page_count(8) == 1
        assert page_count(9) == 2

    def test_no_controls_for_single_page(self):
        assert pagination_controls(_state([_item(n) for n in range(8)])) is None
        assert pagination_controls(_state([])) is None

    def test_controls_on_first_page(self):
        controls = pagination_controls(_state([_item(n) for n in range(17)]))
        assert not controls.previous_enabled
        assert controls.next_enabled
        assert [b.number for b in controls.buttons] == [1, 2, 3]
        assert [b.current for b in controls.buttons] == [True, False, False]

    def test_controls_on_last_page(self):
        state = go_to_page(_state([_item(n) for n in range(17)]), 3)
        controls = pagination_controls(state)
        assert controls.previous_enabled
        assert not controls.next_enabled
        assert controls.buttons[2].current


# ── Helpers ──────────────────────────────────────────────────────────────────


def test_categories_are_distinct_and_sorted():
    assert categories(CATALOG) == ["clothing", "electronics", "home"]


def test_excerpt():
    assert excerpt("short") == "short"
    assert excerpt("x" * 61) == "x" * 60 + "..."
    assert excerpt("x" * 60) == "x" * 60
