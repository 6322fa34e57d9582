"""Data models for the Veni Vici artwork viewer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

# Image service configuration
IIIF_BASE_URL = "https://www.artic.edu/iiif/2"
IMAGE_WIDTH = 843

# Records requested per refresh
BATCH_SIZE = 50


class BanCategory(Enum):
    """Attribute kinds a user can ban."""

    ARTIST = "artist"
    STYLE = "style"
    PLACE = "place"

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]


_CATEGORY_LABELS = {
    BanCategory.ARTIST: "Artist",
    BanCategory.STYLE: "Style",
    BanCategory.PLACE: "Place of Origin",
}


def _text(value: Any) -> str:
    """Normalize an API field to a string, mapping null to empty."""
    if value is None:
        return ""
    return str(value).strip()


@dataclass(frozen=True)
class ArtworkRecord:
    """One artwork as returned by the catalog."""

    id: str
    image_id: str  # Required for display; empty means not displayable
    title: str = ""
    artist: str = ""
    date: str = ""
    style: str = ""
    place: str = ""  # Place of origin
    medium: str = ""

    @classmethod
    def from_api(cls, item: dict[str, Any]) -> "ArtworkRecord":
        """Build a record from an AIC artwork object."""
        return cls(
            id=_text(item.get("id")),
            image_id=_text(item.get("image_id")),
            title=_text(item.get("title")),
            artist=_text(item.get("artist_title")),
            date=_text(item.get("date_display")),
            style=_text(item.get("style_title")),
            place=_text(item.get("place_of_origin")),
            medium=_text(item.get("medium_display")),
        )

    @property
    def has_image(self) -> bool:
        return bool(self.image_id)

    def value_for(self, category: BanCategory) -> str:
        """Return the attribute value a ban category applies to."""
        if category is BanCategory.ARTIST:
            return self.artist
        if category is BanCategory.STYLE:
            return self.style
        return self.place

    def image_url(self, width: int = IMAGE_WIDTH) -> str:
        """Compose the IIIF image URL. Pure string building, no request."""
        return f"{IIIF_BASE_URL}/{self.image_id}/full/{width},/0/default.jpg"


@dataclass(frozen=True)
class BanEntry:
    """A (category, value) pair excluded from selection."""

    category: BanCategory
    value: str

    def matches(self, record: ArtworkRecord) -> bool:
        return bool(self.value) and record.value_for(self.category) == self.value


# Ordered, duplicate-free; order is display order
BanList = tuple[BanEntry, ...]


@dataclass
class FetchOptions:
    """Options the catalog adapter translates to API-specific params."""

    limit: int = BATCH_SIZE
    public_domain_only: bool = True

    # SSL bypass for debugging
    ssl_bypass: bool = False


class EmptyReason(Enum):
    """Why a refresh produced no artwork."""

    NO_DATA = "No artworks found. Please try again."
    ALL_BANNED = (
        "No artworks found that match your criteria. "
        "Try removing some items from your ban list."
    )


@dataclass(frozen=True)
class Selected:
    """A refresh picked an artwork."""

    record: ArtworkRecord

    @property
    def message(self) -> str:
        return ""


@dataclass(frozen=True)
class EmptyResult:
    """A refresh had nothing to show."""

    reason: EmptyReason

    @property
    def message(self) -> str:
        return self.reason.value


@dataclass(frozen=True)
class FetchFailed:
    """The catalog request failed."""

    message: str


SelectionResult = Union[Selected, EmptyResult, FetchFailed]
