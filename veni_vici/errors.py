"""Catalog error types."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for failures fetching a batch from the catalog.

    The message is user-facing; ``detail`` keeps the technical cause for logs.
    """

    def __init__(self, message: str, detail: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail or message


class NetworkError(CatalogError):
    """The request did not complete: connectivity, timeout or non-2xx status."""


class ParseError(CatalogError):
    """The response body was not the JSON document we asked for."""
