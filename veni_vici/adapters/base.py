"""Abstract base class for catalog adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable
import requests

from ..errors import CatalogError, NetworkError, ParseError
from ..models import ArtworkRecord, FetchOptions


class CatalogAdapter(ABC):
    """
    Abstract base class for artwork catalog adapters.

    Subclasses implement catalog-specific request and parsing logic while this
    base class maps transport failures to the catalog error types and
    provides the logging hook.
    """

    # Subclasses must define these
    name: str = "Unknown Catalog"  # Full display name
    short_name: str = "UNK"  # Short identifier (e.g., "AIC")
    base_url: str = ""

    # Timeout in seconds (can be overridden)
    fetch_timeout: int = 30

    # Logging callback - set by app to integrate with UI logging
    _log_callback: Callable[[str, str], None] | None = None

    def set_logger(self, callback: Callable[[str, str], None]) -> None:
        """Set logging callback. Signature: callback(level, message)."""
        self._log_callback = callback

    def _log(self, level: str, message: str) -> None:
        """Log a message if callback is set."""
        if self._log_callback:
            self._log_callback(level, f"[{self.short_name}] {message}")

    def _log_info(self, message: str) -> None:
        self._log("INFO", message)

    def _log_warning(self, message: str) -> None:
        self._log("WARN", message)

    def _log_error(self, message: str) -> None:
        self._log("ERROR", message)

    def fetch_batch(self, options: FetchOptions | None = None) -> list[ArtworkRecord]:
        """
        Fetch one batch of artwork records.

        An empty list means the catalog returned no data. Any failure is
        raised as NetworkError or ParseError carrying a user-facing message.
        """
        options = options or FetchOptions()

        try:
            self._log_info(f"Fetch started (limit={options.limit})")
            records = self._do_fetch(options)
            self._log_info(f"Fetch complete: {len(records)} records")
            return records

        except CatalogError as e:
            self._log_error(e.detail)
            raise

        except requests.Timeout as e:
            self._log_error(f"Timeout after {self.fetch_timeout}s")
            raise NetworkError(
                f"{self.name} took too long to respond. Try again.", str(e)
            ) from e

        except requests.ConnectionError as e:
            self._log_error("Connection failed")
            raise NetworkError(
                f"Could not connect to {self.name}. Check your internet connection.",
                str(e),
            ) from e

        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else "unknown"
            self._log_error(f"HTTP error: {status}")
            raise NetworkError(
                f"{self.name} returned an error (status {status}). Try again later.",
                str(e),
            ) from e

        except requests.RequestException as e:
            self._log_error(f"Request error: {e}")
            raise NetworkError(
                f"Error communicating with {self.name}. Try again.", str(e)
            ) from e

        except Exception as e:
            self._log_error(f"Unexpected error: {type(e).__name__}: {e}")
            raise CatalogError(
                f"Unexpected error from {self.name}.", f"{type(e).__name__}: {e}"
            ) from e

    @abstractmethod
    def _do_fetch(self, options: FetchOptions) -> list[ArtworkRecord]:
        """
        Implement the actual request and parsing.

        Args:
            options: Fetch options to apply

        Returns:
            List of ArtworkRecord objects, in catalog order

        Note: requests and unexpected exceptions are translated by fetch_batch(); parsing
              problems should be raised as ParseError.
        """
        pass
