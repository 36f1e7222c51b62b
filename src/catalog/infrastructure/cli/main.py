import logging

import click

from catalog.infrastructure.cli.index_commands import index_ensure
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_search,
    product_update,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="INFO",
    envvar="CATALOG_LOG_LEVEL",
    show_default=True,
    help="Logging level.",
)
@click.option("--timeout", type=click.FloatRange(min=0, min_open=True), default=None, help="Per-request timeout in seconds.")
@click.pass_context
def cli(ctx: click.Context, log_level: str, timeout: float | None) -> None:
    """Product catalog backed by a search index."""
    ctx.ensure_object(dict)
    ctx.obj["timeout"] = timeout
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def index() -> None:
    """Manage the catalog index."""


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
index.add_command(index_ensure)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_search)
product.add_command(product_update)
