"""Art Institute of Chicago adapter."""

from __future__ import annotations

import requests

from . import register
from .base import CatalogAdapter
from ..errors import ParseError
from ..models import ArtworkRecord, FetchOptions

# Only the fields the viewer shows
FIELDS = [
    "id",
    "title",
    "artist_title",
    "date_display",
    "image_id",
    "style_title",
    "place_of_origin",
    "medium_display",
]


@register
class AICAdapter(CatalogAdapter):
    """Adapter for the Art Institute of Chicago public API."""

    name = "Art Institute of Chicago"
    short_name = "AIC"
    base_url = "https://api.artic.edu/api/v1/artworks"

    def build_params(self, options: FetchOptions) -> dict[str, str | int]:
        """Build query parameters for one batch request."""
        params: dict[str, str | int] = {
            "limit": options.limit,
            "fields": ",".join(FIELDS),
        }
        if options.public_domain_only:
            params["query[term][is_public_domain]"] = "true"
        return params

    def _do_fetch(self, options: FetchOptions) -> list[ArtworkRecord]:
        """Execute one request against the AIC API and parse the batch."""
        self._log_info(
            f"Fetching from API (timeout={self.fetch_timeout}s, "
            f"ssl_bypass={options.ssl_bypass}, limit={options.limit})"
        )

        response = requests.get(
            self.base_url,
            params=self.build_params(options),
            timeout=self.fetch_timeout,
            verify=not options.ssl_bypass,
        )
        response.raise_for_status()

        try:
            data = response.json()
        except ValueError as e:
            # requests.JSONDecodeError subclasses ValueError
            raise ParseError(
                f"{self.name} sent a response we could not read.",
                f"Malformed JSON: {e}",
            ) from e

        if not isinstance(data, dict):
            raise ParseError(
                f"{self.name} sent a response we could not read.",
                f"Expected a JSON object, got {type(data).__name__}",
            )

        raw_artworks = data.get("data")
        if raw_artworks is None:
            raw_artworks = []
        if not isinstance(raw_artworks, list):
            raise ParseError(
                f"{self.name} sent a response we could not read.",
                f"Expected 'data' to be a list, got {type(raw_artworks).__name__}",
            )

        self._log_info(f"Received {len(raw_artworks)} artworks from API")

        records: list[ArtworkRecord] = []
        for item in raw_artworks:
            if not isinstance(item, dict):
                self._log_warning(f"Skipping non-object entry: {item!r}")
                continue
            records.append(ArtworkRecord.from_api(item))

        return records
