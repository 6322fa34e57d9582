import pytest

from veni_vici.models import ArtworkRecord


@pytest.fixture
def make_record():
    """Factory for artwork records with an image by default."""

    def _make(id="1", image_id="img", **fields):
        return ArtworkRecord(id=str(id), image_id=image_id, **fields)

    return _make
