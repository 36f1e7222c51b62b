"""Runtime settings for the catalog, read from the environment."""

from __future__ import annotations

import base64
import binascii
import os
from functools import lru_cache

from pydantic import BaseModel, Field, field_validator


def _optional_env(name: str) -> str | None:
    value = os.getenv(name)
    return value or None


class CatalogSettings(BaseModel):
    """Connection and index settings; defaults come from the environment."""

    elastic_url: str = Field(default_factory=lambda: os.getenv("ELASTIC_URL", "http://localhost:9200"))
    elastic_cloud_id: str | None = Field(
        default_factory=lambda: _optional_env("ELASTIC_CLOUD_ID"), validate_default=True
    )
    elastic_api_key: str | None = Field(default_factory=lambda: _optional_env("ELASTIC_API_KEY"))
    elastic_username: str | None = Field(default_factory=lambda: _optional_env("ELASTIC_USERNAME"))
    elastic_password: str | None = Field(default_factory=lambda: _optional_env("ELASTIC_PASSWORD"))
    index_name: str = Field(default_factory=lambda: os.getenv("CATALOG_INDEX", "products"))
    request_timeout: float = Field(default_factory=lambda: float(os.getenv("CATALOG_TIMEOUT", "10")), gt=0)

    @field_validator("elastic_cloud_id")
    @classmethod
    def _cloud_id_decodes(cls, value: str | None) -> str | None:
        if value is not None:
            endpoint_from_cloud_id(value)
        return value

    @property
    def endpoint(self) -> str:
        """Base URL of the cluster; a cloud id wins over ``elastic_url``."""
        if self.elastic_cloud_id:
            return endpoint_from_cloud_id(self.elastic_cloud_id)
        return self.elastic_url.rstrip("/")


def endpoint_from_cloud_id(cloud_id: str) -> str:
    """Decode an Elastic Cloud id into the Elasticsearch endpoint.

    A cloud id looks like ``<label>:<base64("host$es_uuid$kibana_uuid")>``;
    the host part may carry a ``:port`` suffix, which is kept.
    """
    _, sep, encoded = cloud_id.partition(":")
    if not sep or not encoded:
        raise ValueError(f"Malformed cloud id: {cloud_id!r}")
    try:
        decoded = base64.b64decode(encoded + "=" * (-len(encoded) % 4)).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError) as exc:
        raise ValueError(f"Malformed cloud id: {cloud_id!r}") from exc

    parts = decoded.split("$")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise ValueError(f"Malformed cloud id: {cloud_id!r}")

    host, es_uuid = parts[0], parts[1]
    port = ""
    if ":" in host:
        host, port = host.rsplit(":", 1)
    url = f"https://{es_uuid}.{host}"
    if port and port != "443":
        url = f"{url}:{port}"
    return url


@lru_cache(maxsize=1)
def get_settings() -> CatalogSettings:
    return CatalogSettings()


__all__ = ["CatalogSettings", "endpoint_from_cloud_id", "get_settings"]
