"""Domain-level exceptions.

Every failure a catalog operation can surface is a subclass of CatalogError
and carries exactly one ErrorKind, so callers (the CLI, or any transport
layer put in front of the handlers) can map failures without inspecting
store-specific details.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    DUPLICATE_CONFLICT = "DUPLICATE_CONFLICT"
    NOT_FOUND = "NOT_FOUND"
    UNAVAILABLE = "UNAVAILABLE"
    TIMEOUT = "TIMEOUT"
    INTERNAL = "INTERNAL"


class CatalogError(Exception):
    """Base class for all catalog errors."""

    kind: ErrorKind = ErrorKind.INTERNAL


class InvalidArgumentError(CatalogError):
    """A required field is missing, empty or malformed."""

    kind = ErrorKind.INVALID_ARGUMENT


class DuplicateConflictError(CatalogError):
    """An add would create a second product with the same name and price."""

    kind = ErrorKind.DUPLICATE_CONFLICT


class NotFoundError(CatalogError):
    """The targeted product does not exist."""

    kind = ErrorKind.NOT_FOUND


class StoreUnavailableError(CatalogError):
    """The document store could not be reached."""

    kind = ErrorKind.UNAVAILABLE


class StoreTimeoutError(CatalogError):
    """The document store did not answer within the timeout."""

    kind = ErrorKind.TIMEOUT


class StoreInternalError(CatalogError):
    """The document store answered with an unexpected error.

    ``detail`` keeps the store's diagnostic for logging; it is never part
    of the message shown to users.
    """

    kind = ErrorKind.INTERNAL

    def __init__(self, message: str, detail: str | None = None) -> None:
        super().__init__(message)
        self.detail = detail
