"""CLI commands for the catalog index."""

from __future__ import annotations

import click

from catalog.infrastructure.cli.context import ensure_index, open_services


@click.command("ensure")
@click.pass_context
def index_ensure(ctx: click.Context) -> None:
    """Create the catalog index and its mapping if missing."""
    services = open_services(ctx)
    ensure_index(services)

    click.echo(f"Index '{services.gateway.index_name}' is ready.")
