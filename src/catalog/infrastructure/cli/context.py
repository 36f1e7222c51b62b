"""Lazily built services shared by the CLI commands.

Nothing here runs until a command callback does, so ``--help`` on any
command never touches the configuration or the cluster.
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

import click

from catalog.infrastructure.bootstrap import CatalogServices, build_services
from catalog.infrastructure.config import get_settings
from catalog.infrastructure.search.index_gateway import IndexProvisioningError


def open_services(ctx: click.Context) -> CatalogServices:
    obj = ctx.find_object(dict)
    if "services" not in obj:
        if "settings" not in obj:
            try:
                obj["settings"] = get_settings()
            except ValueError as exc:
                raise click.ClickException(f"Invalid configuration: {exc}")
        services = build_services(
            obj["settings"],
            timeout=obj.get("timeout"),
            transport=obj.get("transport"),
        )
        ctx.find_root().call_on_close(services.close)
        obj["services"] = services
    return obj["services"]


def ensure_index(services: CatalogServices) -> None:
    try:
        services.gateway.ensure_index()
    except IndexProvisioningError as exc:
        raise click.ClickException(str(exc))


def pass_catalog(f: Callable[..., Any]) -> Callable[..., Any]:
    """Pass the services to a product command once the index exists."""

    def wrapper(*args: Any, **kwargs: Any) -> Any:
        ctx = click.get_current_context()
        services = open_services(ctx)
        ensure_index(services)
        return ctx.invoke(f, services, *args, **kwargs)

    return functools.update_wrapper(wrapper, f)
