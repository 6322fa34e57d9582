"""Ban list store and the ban filter.

Both are pure: the ban list is an immutable tuple and every operation returns
a new one, so the Streamlit layer only ever swaps the value it holds.
"""

from __future__ import annotations

from typing import Iterable

from .models import ArtworkRecord, BanCategory, BanEntry, BanList

EMPTY_BAN_LIST: BanList = ()


def is_banned(ban_list: BanList, category: BanCategory, value: str) -> bool:
    """True if (category, value) is currently banned."""
    if not value:
        return False
    return BanEntry(category, value) in ban_list


def toggle(ban_list: BanList, category: BanCategory, value: str | None) -> BanList:
    """
    Add or remove one ban entry.

    Empty values are ignored so that an "Unknown" placeholder can never be
    banned. A present entry is removed; an absent one is appended, so the most
    recently banned value is listed last.
    """
    value = (value or "").strip()
    if not value:
        return ban_list

    entry = BanEntry(category, value)
    if entry in ban_list:
        return tuple(existing for existing in ban_list if existing != entry)
    return ban_list + (entry,)


def violates(record: ArtworkRecord, ban_list: BanList) -> bool:
    """True if any of the record's bannable attributes is in the ban list."""
    return any(entry.matches(record) for entry in ban_list)


def filter_batch(batch: Iterable[ArtworkRecord], ban_list: BanList) -> list[ArtworkRecord]:
    """Drop records without an image and records matching any ban entry."""
    return [
        record
        for record in batch
        if record.has_image and not violates(record, ban_list)
    ]
