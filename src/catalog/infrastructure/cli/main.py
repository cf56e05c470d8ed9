import locale
import logging

import click

from catalog.infrastructure import bootstrap
from catalog.infrastructure.cli.browse_commands import browse
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_show,
    product_update,
)
from catalog.infrastructure.cli.server_commands import seed, serve
from catalog.infrastructure.log_config import configure_logging

logger = logging.getLogger(__name__)


@click.group()
@click.option("--log-level", default=None, help="Override CATALOG_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Catalog — product catalog API and client"""
    configure_logging(log_level or bootstrap.settings().log_level)
    # Name sorting collates with the user's locale rather than raw code points.
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        logger.warning("Using default collation, cannot apply locale: %s", exc)


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
cli.add_command(serve)
cli.add_command(seed)
cli.add_command(browse)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
