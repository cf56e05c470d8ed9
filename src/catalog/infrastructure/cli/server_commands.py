"""CLI commands for running the API and seeding the store."""

from __future__ import annotations

import logging

import click

from catalog.application.seed_catalog import SeedCatalogHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure import bootstrap
from catalog.infrastructure.http.app import create_app

logger = logging.getLogger(__name__)


@click.command("serve")
@click.option("--host", default=None, help="Bind address (default CATALOG_HOST).")
@click.option("--port", default=None, type=int, help="Port (default PORT or 5000).")
@click.option("--seed", "seed_first", is_flag=True, default=False,
              help="Insert sample products if the catalog is empty.")
@click.option("--debug", is_flag=True, default=False, help="Run Flask in debug mode.")
def serve(host: str | None, port: int | None, seed_first: bool, debug: bool) -> None:
    """Run the catalog HTTP API."""
    settings = bootstrap.settings()
    app = create_app(settings)

    if seed_first:
        try:
            SeedCatalogHandler(app.extensions["catalog"].product_repo).handle()
        except DomainException as exc:
            logger.error("Seeding failed: %s", exc)

    app.run(host=host or settings.host, port=port or settings.port, debug=debug)


@click.command("seed")
def seed() -> None:
    """Insert sample products if the catalog is empty."""
    try:
        inserted = SeedCatalogHandler(bootstrap.product_repository()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if inserted:
        click.echo(f"Seeded {inserted} products.")
    else:
        click.echo("Catalog already has products, nothing to seed.")
