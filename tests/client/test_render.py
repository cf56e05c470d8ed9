"""Tests for the terminal rendering of the catalog grid."""

from catalog.client.cart import add_to_cart
from catalog.client.pipeline import go_to_page
from catalog.client.render import EMPTY_MESSAGE, render_page, render_pagination
from catalog.client.state import CatalogItem, CatalogState


def _items(count: int) -> list[CatalogItem]:
    return [
        CatalogItem(id=str(n), name=f"Item {n}", description="d" * 70, price=n,
                    category="home", image=f"{n}.png")
        for n in range(1, count + 1)
    ]


def test_empty_result_renders_placeholder_only():
    assert render_page(CatalogState.loaded([])) == EMPTY_MESSAGE


def test_single_page_has_no_pagination():
    text = render_page(CatalogState.loaded(_items(3)))
    assert "Item 3" in text
    assert "Previous" not in text


def test_window_and_numbering_on_second_page():
    state = go_to_page(CatalogState.loaded(_items(10)), 2)
    text = render_page(state, lambda name: f"http://img/{name}")
    assert " 9. Item 9" in text
    assert "10. Item 10" in text
    assert "Item 8 " not in text
    assert "http://img/9.png" in text
    assert "d" * 60 + "..." in text


def test_pagination_marks_current_and_disabled_controls():
    state = CatalogState.loaded(_items(17))
    assert render_pagination(state) == "(Previous) [1] 2 3 Next"
    assert render_pagination(go_to_page(state, 3)) == "Previous 1 2 [3] (Next)"


def test_add_to_cart_stub():
    assert add_to_cart("abc") == "Product added to cart!"
