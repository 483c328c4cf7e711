"""Tests for the in-memory region store."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from locator.geometry.models import Coordinate
from locator.geometry.parsers import WKTParser
from locator.regions.models import Region
from locator.regions.store import RegionStore

_parser = WKTParser()


def _square(x0: float, y0: float, x1: float, y1: float) -> str:
    return f"MULTIPOLYGON((({x0} {y0},{x0} {y1},{x1} {y1},{x1} {y0},{x0} {y0})))"


def _region(name: str, wkt: str, city: str = "Chicago", state: str = "IL") -> Region:
    return Region(name=name, city=city, state=state, geometry=_parser.parse(wkt))


def _pt(x: float, y: float) -> Coordinate:
    return Coordinate(longitude=x, latitude=y)


@pytest.fixture
def store():
    return RegionStore()


class TestRegionModel:
    def test_fields_are_stripped(self):
        region = _region("  Downtown ", _square(0, 0, 10, 10), city=" Chicago", state="IL ")
        assert region.name == "Downtown"
        assert region.city == "Chicago"
        assert region.state == "IL"

    @pytest.mark.parametrize("field", ["name", "city", "state"])
    def test_blank_fields_rejected(self, field):
        values = {"name": "Downtown", "city": "Chicago", "state": "IL"}
        values[field] = "   "
        with pytest.raises(ValidationError):
            Region(geometry=_parser.parse(_square(0, 0, 10, 10)), **values)

    def test_ids_are_generated(self):
        a = _region("A", _square(0, 0, 1, 1))
        b = _region("A", _square(0, 0, 1, 1))
        assert a.id and b.id and a.id != b.id

    def test_label(self):
        assert _region("Uptown", _square(0, 0, 1, 1)).label == "Uptown, Chicago, IL"


class TestRegionStore:
    def test_downtown_scenario(self, store):
        region_id = store.insert(_region("Downtown", "MULTIPOLYGON(((0 0,0 10,10 10,10 0,0 0)))"))
        found = store.find_containing(_pt(5, 5))
        assert found is not None
        assert found.name == "Downtown"
        assert found.id == region_id
        assert store.find_containing(_pt(20, 20)) is None

    def test_empty_store_finds_nothing(self, store):
        assert store.find_containing(_pt(0, 0)) is None
        assert store.list_all() == []
        assert store.count == 0

    def test_overlap_first_inserted_wins(self, store):
        store.insert(_region("A", _square(0, 0, 5, 5)))
        store.insert(_region("B", _square(0, 0, 3, 3)))
        assert store.find_containing(_pt(1, 1)).name == "A"

    def test_overlap_order_is_insertion_not_size(self, store):
        store.insert(_region("B", _square(0, 0, 3, 3)))
        store.insert(_region("A", _square(0, 0, 5, 5)))
        assert store.find_containing(_pt(1, 1)).name == "B"
        assert store.find_containing(_pt(4, 4)).name == "A"

    def test_points_in_distinct_regions(self, store):
        store.insert_batch([
            _region("West", _square(0, 0, 10, 10)),
            _region("East", _square(10, 0, 20, 10)),
        ])
        assert store.find_containing(_pt(5, 5)).name == "West"
        assert store.find_containing(_pt(15, 5)).name == "East"
        assert store.find_containing(_pt(10, 5)) is None

    def test_envelope_hit_but_outside_geometry(self, store):
        store.insert(_region(
            "L", "MULTIPOLYGON(((0 0,10 0,10 4,4 4,4 10,0 10,0 0)))"
        ))
        assert store.find_containing(_pt(7, 7)) is None
        assert store.find_containing(_pt(2, 7)).name == "L"

    def test_island_inside_hole(self, store):
        store.insert(_region(
            "Donut",
            "MULTIPOLYGON(((0 0,0 10,10 10,10 0,0 0),(3 3,3 7,7 7,7 3,3 3)))",
        ))
        store.insert(_region("Island", _square(4, 4, 6, 6)))
        assert store.find_containing(_pt(5, 5)).name == "Island"
        assert store.find_containing(_pt(1, 1)).name == "Donut"
        assert store.find_containing(_pt(3.5, 3.5)) is None

    def test_list_all_insertion_order(self, store):
        ids = store.insert_batch([_region(n, _square(0, 0, 1, 1)) for n in ("C", "A", "B")])
        store.insert(_region("D", _square(0, 0, 1, 1)))
        regions = store.list_all()
        assert [r.name for r in regions] == ["C", "A", "B", "D"]
        assert [r.id for r in regions[:3]] == ids
        assert store.count == 4

    def test_duplicate_names_allowed(self, store):
        store.insert(_region("Same", _square(0, 0, 1, 1)))
        store.insert(_region("Same", _square(2, 2, 3, 3)))
        assert store.count == 2

    def test_snapshot_unaffected_by_later_batch(self, store):
        store.insert(_region("First", _square(0, 0, 1, 1)))
        snapshot = store.list_all()
        store.insert_batch([_region("Second", _square(0, 0, 1, 1))])
        assert [r.name for r in snapshot] == ["First"]
        assert store.count == 2

    def test_failed_batch_commits_nothing(self, store):
        def regions():
            yield _region("Good", _square(0, 0, 1, 1))
            raise RuntimeError("source broke")

        with pytest.raises(RuntimeError):
            store.insert_batch(regions())
        assert store.count == 0
