"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Everything it builds is passed on explicitly; nothing here is a
module-level singleton.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from catalog.application.add_product import AddProductHandler
from catalog.domain.repository.product_repository import ProductRepository
from catalog.domain.service.duplicate_guard import DuplicateGuard
from catalog.infrastructure.config import CatalogSettings
from catalog.infrastructure.persistence.elasticsearch_product_repository import (
    ElasticsearchProductRepository,
)
from catalog.infrastructure.search.client import SearchIndexClient
from catalog.infrastructure.search.index_gateway import IndexGateway


def http_client(
    settings: CatalogSettings,
    timeout: float | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    headers = {"Content-Type": "application/json"}
    auth: tuple[str, str] | None = None
    if settings.elastic_api_key:
        headers["Authorization"] = f"ApiKey {settings.elastic_api_key}"
    elif settings.elastic_username:
        auth = (settings.elastic_username, settings.elastic_password or "")

    return httpx.Client(
        base_url=settings.endpoint,
        headers=headers,
        auth=auth,
        timeout=timeout if timeout is not None else settings.request_timeout,
        transport=transport,
    )


@dataclass
class CatalogServices:
    """Everything a caller needs to run catalog operations."""

    http: httpx.Client
    gateway: IndexGateway
    products: ProductRepository
    duplicate_guard: DuplicateGuard

    def add_product_handler(self) -> AddProductHandler:
        return AddProductHandler(self.products, self.duplicate_guard)

    def close(self) -> None:
        self.http.close()


def build_services(
    settings: CatalogSettings,
    timeout: float | None = None,
    transport: httpx.BaseTransport | None = None,
) -> CatalogServices:
    http = http_client(settings, timeout=timeout, transport=transport)
    client = SearchIndexClient(http)
    return CatalogServices(
        http=http,
        gateway=IndexGateway(client, settings.index_name),
        products=ElasticsearchProductRepository(client, settings.index_name),
        duplicate_guard=DuplicateGuard(),
    )
