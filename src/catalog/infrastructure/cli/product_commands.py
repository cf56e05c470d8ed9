"""CLI commands for managing products directly against the configured store."""

from __future__ import annotations

from contextlib import ExitStack
from pathlib import Path

import click

from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import ImageUpload, ProductDTO, ProductFields
from catalog.application.query_products import GetProductHandler, ListProductsHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.bootstrap import image_store, product_repository

_image_option = click.option(
    "--image",
    "image_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Image file to upload.",
)


def _display_product(dto: ProductDTO) -> None:
    click.echo(f"Product {dto.id}")
    click.echo(f"  Name:        {dto.name}")
    click.echo(f"  Category:    {dto.category}")
    click.echo(f"  Price:       ${dto.price:.2f}")
    click.echo(f"  Stock:       {dto.stock}")
    click.echo(f"  Rating:      {dto.rating:g}")
    click.echo(f"  Image:       {dto.image}")
    click.echo(f"  Created:     {dto.created_at}")
    click.echo(f"  Description: {dto.description}")


@click.command("list")
@click.option("--category", default=None, help="Only list this category (exact match).")
def product_list(category: str | None) -> None:
    """List products in the catalog."""
    try:
        products = ListProductsHandler(product_repository()).handle(category=category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<26} {'Name':<24} {'Category':<14} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 84)
    for p in products:
        click.echo(
            f"{p.id:<26} {p.name[:24]:<24} {p.category[:14]:<14} {p.price:>10.2f} {p.stock:>6}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show one product."""
    try:
        dto = GetProductHandler(product_repository()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Product description.")
@click.option("--price", required=True, help="Price (e.g. 9.99).")
@click.option("--category", required=True, help="Category key.")
@click.option("--stock", default=None, help="Units in stock (default 0).")
@click.option("--rating", default=None, help="Rating (default 0).")
@click.option(
    "--image",
    "image_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Image file to upload.",
)
def product_add(
    name: str,
    description: str,
    price: str,
    category: str,
    stock: str | None,
    rating: str | None,
    image_path: Path,
) -> None:
    """Add a new product to the catalog."""
    handler = CreateProductHandler(product_repository(), image_store())
    fields = ProductFields(
        name=name, description=description, price=price,
        category=category, stock=stock, rating=rating,
    )

    try:
        with open(image_path, "rb") as fh:
            dto = handler.handle(fields, ImageUpload(filename=image_path.name, stream=fh))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product {dto.id} '{dto.name}' added at ${dto.price:.2f}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--price", default=None, help="New price.")
@click.option("--category", default=None, help="New category.")
@click.option("--stock", default=None, help="New stock level.")
@click.option("--rating", default=None, help="New rating.")
@_image_option
def product_update(
    product_id: str,
    name: str | None,
    description: str | None,
    price: str | None,
    category: str | None,
    stock: str | None,
    rating: str | None,
    image_path: Path | None,
) -> None:
    """Update any subset of a product's fields."""
    handler = UpdateProductHandler(product_repository(), image_store())
    fields = ProductFields(
        name=name, description=description, price=price,
        category=category, stock=stock, rating=rating,
    )

    try:
        with ExitStack() as stack:
            upload = None
            if image_path is not None:
                fh = stack.enter_context(open(image_path, "rb"))
                upload = ImageUpload(filename=image_path.name, stream=fh)
            dto = handler.handle(product_id, fields, upload)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_product(dto)


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_delete(product_id: str) -> None:
    """Delete a product and its image."""
    handler = DeleteProductHandler(product_repository(), image_store())

    try:
        message = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{message}: {product_id}")
