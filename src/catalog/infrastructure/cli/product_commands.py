"""CLI commands for products."""

from __future__ import annotations

import click

from catalog.application.delete_product import DeleteProductHandler
from catalog.application.list_products import ListProductsHandler
from catalog.application.search_products import SearchProductsHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import CatalogError
from catalog.domain.model.product import Product
from catalog.infrastructure.bootstrap import CatalogServices
from catalog.infrastructure.cli.context import pass_catalog


def _fail(exc: CatalogError) -> click.ClickException:
    return click.ClickException(f"{exc.kind.value}: {exc}")


def _display_products(products: list[Product]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<22} {'Name':<30} {'Price':>10}")
    click.echo("-" * 64)
    for p in products:
        click.echo(f"{p.id:<22} {p.name:<30} {p.price:>10.2f}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 9.99).")
@pass_catalog
def product_add(services: CatalogServices, name: str, price: str) -> None:
    """Add a new product to the catalog."""
    handler = services.add_product_handler()

    try:
        product = handler.handle(name=name, price=price)
    except CatalogError as exc:
        raise _fail(exc)

    click.echo(f"Product {product.id} '{product.name}' added at {product.price:.2f}")


@click.command("list")
@pass_catalog
def product_list(services: CatalogServices) -> None:
    """List the first page of products in the catalog."""
    handler = ListProductsHandler(product_repo=services.products)

    try:
        products = handler.handle()
    except CatalogError as exc:
        raise _fail(exc)

    _display_products(products)


@click.command("search")
@click.option("--name", default="", help="Name to search for (typos tolerated).")
@pass_catalog
def product_search(services: CatalogServices, name: str) -> None:
    """Fuzzy search products by name."""
    handler = SearchProductsHandler(product_repo=services.products)

    try:
        products = handler.handle(name)
    except CatalogError as exc:
        raise _fail(exc)

    _display_products(products)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--price", default=None, help="New price (e.g. 12.99).")
@pass_catalog
def product_update(services: CatalogServices, product_id: str, name: str | None, price: str | None) -> None:
    """Update a product's name and/or price."""
    handler = UpdateProductHandler(product_repo=services.products)

    try:
        product = handler.handle(product_id=product_id, name=name, price=price)
    except CatalogError as exc:
        raise _fail(exc)

    click.echo(f"Product {product.id} updated: '{product.name}' at {product.price:.2f}")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@pass_catalog
def product_delete(services: CatalogServices, product_id: str) -> None:
    """Delete a product."""
    handler = DeleteProductHandler(product_repo=services.products)

    try:
        handler.handle(product_id)
    except CatalogError as exc:
        raise _fail(exc)

    click.echo(f"Product {product_id} deleted.")
