"""``catalog browse`` — the terminal Catalog Client."""

from __future__ import annotations

import click

from catalog.client.api_client import CatalogApiClient, CatalogApiError
from catalog.client.cart import add_to_cart
from catalog.client.pipeline import apply_criteria, categories, go_to_page
from catalog.client.render import ERROR_MESSAGE, LOADING_MESSAGE, render_page
from catalog.client.state import FilterCriteria, SortOrder
from catalog.infrastructure import bootstrap

_SORT_CHOICES = [order.value for order in SortOrder if order.value]


@click.command("browse")
@click.option("--category", default="", help="Only show this category.")
@click.option("--search", default="", help="Case-insensitive text in name or description.")
@click.option("--sort", "sort_by", type=click.Choice(_SORT_CHOICES), default=None,
              help="Sort order.")
@click.option("--page", default=1, type=int, show_default=True, help="Page to show.")
@click.option("--api-url", default=None, help="API base URL (default CATALOG_API_URL).")
@click.option("--add-to-cart", "cart_product_id", default=None, help="Product ID to add to cart.")
def browse(
    category: str,
    search: str,
    sort_by: str | None,
    page: int,
    api_url: str | None,
    cart_product_id: str | None,
) -> None:
    """Fetch the catalog once, then filter, sort and page through it."""
    client = CatalogApiClient(api_url or bootstrap.settings().api_url)

    click.echo(LOADING_MESSAGE, err=True)
    try:
        state = client.load_catalog()
    except CatalogApiError as exc:
        raise click.ClickException(ERROR_MESSAGE) from exc

    criteria = FilterCriteria(category=category, search=search, sort=SortOrder(sort_by or ""))
    state = go_to_page(apply_criteria(state, criteria), page)

    click.echo(f"Categories: {', '.join(categories(state.all_products)) or '-'}")
    click.echo()
    click.echo(render_page(state, client.image_url))

    if cart_product_id:
        click.echo()
        click.echo(add_to_cart(cart_product_id))
