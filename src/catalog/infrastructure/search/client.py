"""Thin client over the Elasticsearch REST API.

Only the handful of endpoints the catalog needs are wrapped. Failures are
raised as SearchIndexError subclasses carrying the HTTP status and the
store's error type; translating them into catalog errors is the
repository's job.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx

logger = logging.getLogger(__name__)


class SearchIndexError(Exception):
    """Base class for failures talking to the search index."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_type: str | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_type = error_type
        self.body = body


class SearchIndexTimeout(SearchIndexError):
    """The request did not complete within the client timeout."""


class SearchIndexUnavailable(SearchIndexError):
    """The cluster could not be reached or refused to serve the request."""


class SearchIndexHTTPError(SearchIndexError):
    """The cluster answered with an error status."""


# Statuses that mean "try again later" rather than "your request is wrong".
_UNAVAILABLE_STATUSES = frozenset({502, 503})


class SearchIndexClient:
    """Wraps a configured ``httpx.Client`` (base URL, auth, timeout).

    The wrapped client is shared read-only across callers.
    """

    def __init__(self, http: httpx.Client) -> None:
        self._http = http

    # --- Index management -----------------------------------------------------

    def index_exists(self, index: str) -> bool:
        response = self._request("HEAD", f"/{_segment(index)}", allow_404=True)
        return response.status_code == 200

    def create_index(self, index: str, mappings: Mapping[str, Any]) -> dict:
        response = self._request(
            "PUT", f"/{_segment(index)}", json={"mappings": dict(mappings)}
        )
        return response.json()

    # --- Queries --------------------------------------------------------------

    def search(
        self,
        index: str,
        query: Mapping[str, Any],
        size: int | None = None,
    ) -> dict:
        body: dict[str, Any] = {"query": dict(query)}
        if size is not None:
            body["size"] = size
        response = self._request("POST", f"/{_segment(index)}/_search", json=body)
        return response.json()

    # --- Documents ------------------------------------------------------------

    def index_document(
        self,
        index: str,
        document: Mapping[str, Any],
        refresh: bool = False,
    ) -> dict:
        response = self._request(
            "POST",
            f"/{_segment(index)}/_doc",
            json=dict(document),
            params=_refresh_params(refresh),
        )
        return response.json()

    def update_document(
        self,
        index: str,
        doc_id: str,
        doc: Mapping[str, Any],
        refresh: bool = False,
        return_source: bool = False,
    ) -> dict:
        params = _refresh_params(refresh)
        if return_source:
            params["_source"] = "true"
        response = self._request(
            "POST",
            f"/{_segment(index)}/_update/{_segment(doc_id)}",
            json={"doc": dict(doc)},
            params=params,
        )
        return response.json()

    def delete_document(self, index: str, doc_id: str, refresh: bool = False) -> dict:
        response = self._request(
            "DELETE",
            f"/{_segment(index)}/_doc/{_segment(doc_id)}",
            params=_refresh_params(refresh),
        )
        return response.json()

    # --- Transport ------------------------------------------------------------

    def _request(
        self,
        method: str,
        path: str,
        allow_404: bool = False,
        **kwargs: Any,
    ) -> httpx.Response:
        try:
            response = self._http.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            raise SearchIndexTimeout(f"{method} {path} timed out") from exc
        except httpx.TransportError as exc:
            raise SearchIndexUnavailable(f"{method} {path} failed: {exc}") from exc

        if response.status_code == 404 and allow_404:
            return response
        if response.status_code >= 400:
            raise _http_error(method, path, response)
        return response


def _segment(value: str) -> str:
    return quote(value, safe="")


def _refresh_params(refresh: bool) -> dict[str, str]:
    return {"refresh": "true"} if refresh else {}


def _http_error(method: str, path: str, response: httpx.Response) -> SearchIndexError:
    body: Any = None
    error_type: str | None = None
    if response.content:
        try:
            body = response.json()
        except ValueError:
            body = response.text
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        error_type = body["error"].get("type")

    message = f"{method} {path} returned {response.status_code}"
    if error_type:
        message = f"{message} ({error_type})"
    logger.debug("Search index error: %s body=%r", message, body)

    cls = (
        SearchIndexUnavailable
        if response.status_code in _UNAVAILABLE_STATUSES
        else SearchIndexHTTPError
    )
    return cls(message, status_code=response.status_code, error_type=error_type, body=body)
