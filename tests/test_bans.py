"""Tests for the ban list store and ban filter."""

import pytest

from veni_vici.bans import EMPTY_BAN_LIST, filter_batch, is_banned, toggle
from veni_vici.models import BanCategory, BanEntry


class TestToggle:
    def test_toggle_adds_then_removes(self):
        once = toggle(EMPTY_BAN_LIST, BanCategory.STYLE, "Impressionism")
        assert once == (BanEntry(BanCategory.STYLE, "Impressionism"),)
        assert toggle(once, BanCategory.STYLE, "Impressionism") == ()

    @pytest.mark.parametrize("category", list(BanCategory))
    def test_empty_value_is_noop(self, category):
        bans = (BanEntry(BanCategory.ARTIST, "Monet"),)
        assert toggle(bans, category, "") == bans
        assert toggle(bans, category, None) == bans
        assert toggle(bans, category, "   ") == bans

    def test_toggle_twice_restores_original(self):
        bans = (
            BanEntry(BanCategory.ARTIST, "Monet"),
            BanEntry(BanCategory.PLACE, "France"),
        )
        assert toggle(toggle(bans, BanCategory.STYLE, "Cubism"), BanCategory.STYLE, "Cubism") == bans

    def test_appends_in_insertion_order(self):
        bans = toggle(EMPTY_BAN_LIST, BanCategory.ARTIST, "Monet")
        bans = toggle(bans, BanCategory.PLACE, "France")
        bans = toggle(bans, BanCategory.STYLE, "Cubism")
        assert [entry.value for entry in bans] == ["Monet", "France", "Cubism"]

    def test_removes_only_the_matching_entry(self):
        bans = (
            BanEntry(BanCategory.ARTIST, "Monet"),
            BanEntry(BanCategory.STYLE, "Monet"),
        )
        assert toggle(bans, BanCategory.ARTIST, "Monet") == (BanEntry(BanCategory.STYLE, "Monet"),)

    def test_is_banned(self):
        bans = toggle(EMPTY_BAN_LIST, BanCategory.ARTIST, "Monet")
        assert is_banned(bans, BanCategory.ARTIST, "Monet")
        assert not is_banned(bans, BanCategory.STYLE, "Monet")
        assert not is_banned(bans, BanCategory.ARTIST, "")


class TestFilterBatch:
    def test_drops_banned_artist(self, make_record):
        batch = [
            make_record(id=1, artist="Monet", image_id="x"),
            make_record(id=2, artist="Degas", image_id="y"),
        ]
        bans = (BanEntry(BanCategory.ARTIST, "Monet"),)
        assert [r.id for r in filter_batch(batch, bans)] == ["2"]

    def test_drops_records_without_image(self, make_record):
        batch = [make_record(id=1, image_id="")]
        assert filter_batch(batch, EMPTY_BAN_LIST) == []
        assert filter_batch(batch, (BanEntry(BanCategory.ARTIST, "Monet"),)) == []

    def test_drops_banned_style_and_place(self, make_record):
        batch = [
            make_record(id=1, style="Cubism"),
            make_record(id=2, place="France"),
            make_record(id=3, style="Baroque", place="Italy"),
        ]
        bans = (
            BanEntry(BanCategory.STYLE, "Cubism"),
            BanEntry(BanCategory.PLACE, "France"),
        )
        assert [r.id for r in filter_batch(batch, bans)] == ["3"]

    def test_empty_attributes_never_match(self, make_record):
        batch = [make_record(id=1, artist="", style="", place="")]
        bans = (BanEntry(BanCategory.ARTIST, ""),)
        assert len(filter_batch(batch, bans)) == 1

    def test_no_survivor_violates_bans(self, make_record):
        batch = [
            make_record(id=i, artist=f"A{i % 3}", style=f"S{i % 4}", place=f"P{i % 5}",
                        image_id="" if i % 7 == 0 else "img")
            for i in range(40)
        ]
        bans = (
            BanEntry(BanCategory.ARTIST, "A1"),
            BanEntry(BanCategory.STYLE, "S2"),
            BanEntry(BanCategory.PLACE, "P0"),
        )
        survivors = filter_batch(batch, bans)
        assert survivors
        for record in survivors:
            assert record.image_id
            assert record.artist != "A1"
            assert record.style != "S2"
            assert record.place != "P0"

    def test_does_not_mutate_input(self, make_record):
        batch = [make_record(id=1), make_record(id=2, image_id="")]
        filter_batch(batch, EMPTY_BAN_LIST)
        assert len(batch) == 2
