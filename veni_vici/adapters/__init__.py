"""Catalog adapter registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .base import CatalogAdapter

# Registry of available adapters
_ADAPTERS: dict[str, type[CatalogAdapter]] = {}


def register(cls: type["CatalogAdapter"]) -> type["CatalogAdapter"]:
    """Decorator to register an adapter class."""
    _ADAPTERS[cls.short_name] = cls
    return cls


def get_adapter(short_name: str) -> "CatalogAdapter":
    """Get an adapter instance by short name (e.g., 'AIC')."""
    if short_name not in _ADAPTERS:
        available = ", ".join(_ADAPTERS.keys()) or "none"
        raise ValueError(f"Unknown adapter: {short_name}. Available: {available}")
    return _ADAPTERS[short_name]()


# Import adapters to trigger registration
# These imports must come after the registry is defined
from . import aic  # noqa: E402, F401
