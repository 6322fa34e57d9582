"""Random selection and the refresh pipeline."""

from __future__ import annotations

import random
from typing import Callable, Sequence

from .adapters.base import CatalogAdapter
from .bans import filter_batch
from .errors import CatalogError
from .models import (
    ArtworkRecord,
    BanList,
    EmptyReason,
    EmptyResult,
    FetchFailed,
    FetchOptions,
    Selected,
    SelectionResult,
)

LogCallback = Callable[[str, str], None]


def choose(batch: Sequence[ArtworkRecord], rng: random.Random | None = None) -> SelectionResult:
    """Pick one record uniformly at random; EmptyResult if there is none."""
    if not batch:
        return EmptyResult(EmptyReason.ALL_BANNED)
    rng = rng or random.Random()
    return Selected(batch[rng.randrange(len(batch))])


def refresh(
    adapter: CatalogAdapter,
    ban_list: BanList,
    options: FetchOptions | None = None,
    rng: random.Random | None = None,
    log: LogCallback | None = None,
) -> SelectionResult:
    """
    Fetch a batch, filter it against the ban list and pick one artwork.

    Never raises for catalog failures: they come back as FetchFailed. An empty
    catalog response and a batch emptied by the ban list are reported as
    different EmptyResult reasons.
    """
    def _log(level: str, message: str) -> None:
        if log:
            log(level, message)

    try:
        batch = adapter.fetch_batch(options)
    except CatalogError as e:
        _log("ERROR", f"Refresh failed: {e.detail}")
        return FetchFailed(f"Error fetching artwork: {e.message}")

    if not batch:
        _log("WARN", "Catalog returned no artworks")
        return EmptyResult(EmptyReason.NO_DATA)

    candidates = filter_batch(batch, ban_list)
    _log(
        "INFO",
        f"{len(candidates)} of {len(batch)} artworks eligible "
        f"({len(ban_list)} bans active)",
    )
    if not candidates:
        return EmptyResult(EmptyReason.ALL_BANNED)

    result = choose(candidates, rng)
    if isinstance(result, Selected):
        _log("INFO", f"Selected artwork {result.record.id}: {result.record.title}")
    return result
