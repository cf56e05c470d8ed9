"""Plain-text rendering of the catalog grid for the terminal client."""

from __future__ import annotations

from catalog.client.pipeline import excerpt, page_window, pagination_controls
from catalog.client.state import PRODUCTS_PER_PAGE, CatalogItem, CatalogState

LOADING_MESSAGE = "Loading products..."
ERROR_MESSAGE = "Error loading products. Please try again later."
EMPTY_MESSAGE = "No products found matching your criteria."


def render_card(index: int, item: CatalogItem, image_url: str = "") -> list[str]:
    lines = [
        f"{index:>2}. {item.name}  ${item.price:.2f}  [{item.category}]",
        f"    {excerpt(item.description)}",
    ]
    if image_url:
        lines.append(f"    {image_url}")
    lines.append(f"    id={item.id}  stock={item.stock}  rating={item.rating:g}")
    return lines


def render_pagination(state: CatalogState) -> str:
    """``Previous 1 [2] 3 Next``; disabled controls are parenthesised."""
    controls = pagination_controls(state)
    if controls is None:
        return ""
    parts = ["Previous" if controls.previous_enabled else "(Previous)"]
    parts += [f"[{b.number}]" if b.current else str(b.number) for b in controls.buttons]
    parts.append("Next" if controls.next_enabled else "(Next)")
    return " ".join(parts)


def render_page(state: CatalogState, image_url_for=None) -> str:
    window = page_window(state)
    if not window:
        return EMPTY_MESSAGE

    lines: list[str] = []
    first = (state.current_page - 1) * PRODUCTS_PER_PAGE + 1
    for offset, item in enumerate(window):
        url = image_url_for(item.image) if image_url_for else ""
        lines.extend(render_card(first + offset, item, url))
    pagination = render_pagination(state)
    if pagination:
        lines.append("")
        lines.append(pagination)
    return "\n".join(lines)
