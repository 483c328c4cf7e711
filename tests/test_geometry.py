"""Tests for geometry value types and containment."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from locator.geometry.models import (
    Coordinate,
    Envelope,
    MultiPolygon,
    Polygon,
    Ring,
    contains,
)


def _pt(x: float, y: float) -> Coordinate:
    return Coordinate(longitude=x, latitude=y)


def _ring(*pairs: tuple[float, float]) -> Ring:
    return Ring(coordinates=tuple(_pt(x, y) for x, y in pairs))


def _rotated(pairs: list[tuple[float, float]], k: int) -> list[tuple[float, float]]:
    open_ring = pairs[:-1]
    rotated = open_ring[k:] + open_ring[:k]
    return rotated + [rotated[0]]


SQUARE = [(0, 0), (0, 10), (10, 10), (10, 0), (0, 0)]
L_SHAPE = [(0, 0), (10, 0), (10, 4), (4, 4), (4, 10), (0, 10), (0, 0)]
SAMPLES = [(5, 5), (2, 7), (7, 2), (7, 7), (20, 20), (-1, 5), (9.5, 0.5), (3.9, 9.9)]


@pytest.fixture
def square() -> MultiPolygon:
    return MultiPolygon(polygons=(Polygon(outer=_ring(*SQUARE)),))


@pytest.fixture
def donut() -> MultiPolygon:
    hole = _ring((3, 3), (3, 7), (7, 7), (7, 3), (3, 3))
    return MultiPolygon(polygons=(Polygon(outer=_ring(*SQUARE), holes=(hole,)),))


class TestCoordinate:
    def test_valid_bounds(self):
        c = Coordinate(latitude=-90, longitude=180)
        assert c.latitude == -90.0
        assert c.longitude == 180.0

    @pytest.mark.parametrize("lat,lng", [(90.1, 0), (-91, 0), (0, 180.5), (0, -181)])
    def test_out_of_range_rejected(self, lat, lng):
        with pytest.raises(ValidationError):
            Coordinate(latitude=lat, longitude=lng)

    def test_immutable(self):
        c = Coordinate(latitude=1, longitude=2)
        with pytest.raises(ValidationError):
            c.latitude = 3

    def test_value_equality(self):
        assert Coordinate(latitude=1, longitude=2) == Coordinate(latitude=1.0, longitude=2.0)


class TestRing:
    def test_requires_four_coordinates(self):
        with pytest.raises(ValidationError, match="at least 4"):
            _ring((0, 0), (1, 1), (0, 0))

    def test_requires_closed_loop(self):
        with pytest.raises(ValidationError, match="start and end"):
            _ring((0, 0), (0, 1), (1, 1), (1, 0))

    def test_edges(self):
        ring = _ring(*SQUARE)
        assert len(list(ring.edges())) == 4


class TestMultiPolygon:
    def test_requires_a_polygon(self):
        with pytest.raises(ValidationError):
            MultiPolygon(polygons=())

    def test_envelope(self, square):
        env = square.envelope()
        assert env == Envelope(min_longitude=0, min_latitude=0, max_longitude=10, max_latitude=10)

    def test_envelope_spans_members(self):
        mp = MultiPolygon(polygons=(
            Polygon(outer=_ring(*SQUARE)),
            Polygon(outer=_ring((20, 20), (20, 30), (30, 30), (30, 20), (20, 20))),
        ))
        env = mp.envelope()
        assert (env.min_longitude, env.max_longitude) == (0, 30)
        assert env.contains(_pt(15, 15))


class TestContains:
    def test_interior_point(self, square):
        assert contains(square, _pt(5, 5))
        assert square.contains(_pt(5, 5))

    def test_exterior_point(self, square):
        assert not contains(square, _pt(20, 20))
        assert not contains(square, _pt(-0.001, 5))

    @pytest.mark.parametrize("x,y", [(0, 5), (10, 5), (5, 0), (5, 10), (0, 0), (10, 10)])
    def test_boundary_excluded(self, square, x, y):
        assert not contains(square, _pt(x, y))

    def test_hole_excluded(self, donut):
        assert not contains(donut, _pt(5, 5))
        assert contains(donut, _pt(1, 1))
        assert contains(donut, _pt(8.5, 5))

    def test_hole_boundary_excluded(self, donut):
        assert not contains(donut, _pt(3, 5))
        assert not contains(donut, _pt(7, 7))

    def test_concave_polygon(self):
        mp = MultiPolygon(polygons=(Polygon(outer=_ring(*L_SHAPE)),))
        assert contains(mp, _pt(2, 7))
        assert contains(mp, _pt(7, 2))
        assert not contains(mp, _pt(7, 7))

    def test_any_member_polygon(self):
        mp = MultiPolygon(polygons=(
            Polygon(outer=_ring(*SQUARE)),
            Polygon(outer=_ring((20, 20), (20, 30), (30, 30), (30, 20), (20, 20))),
        ))
        assert contains(mp, _pt(25, 25))
        assert contains(mp, _pt(5, 5))
        assert not contains(mp, _pt(15, 15))

    def test_shared_edge_between_members_excluded(self):
        mp = MultiPolygon(polygons=(
            Polygon(outer=_ring((0, 0), (0, 10), (5, 10), (5, 0), (0, 0))),
            Polygon(outer=_ring((5, 0), (5, 10), (10, 10), (10, 0), (5, 0))),
        ))
        assert not contains(mp, _pt(5, 5))
        assert contains(mp, _pt(4, 5))
        assert contains(mp, _pt(6, 5))

    def test_geographic_coordinates(self):
        loop = [
            (-87.64, 41.87), (-87.64, 41.89), (-87.62, 41.89), (-87.62, 41.87), (-87.64, 41.87),
        ]
        mp = MultiPolygon(polygons=(Polygon(outer=_ring(*loop)),))
        assert contains(mp, Coordinate(latitude=41.8789, longitude=-87.6359))
        assert not contains(mp, Coordinate(latitude=41.9484, longitude=-87.6553))

    @pytest.mark.parametrize("shape", [SQUARE, L_SHAPE])
    def test_invariant_under_rotation(self, shape):
        base = MultiPolygon(polygons=(Polygon(outer=_ring(*shape)),))
        expected = [contains(base, _pt(x, y)) for x, y in SAMPLES]
        for k in range(1, len(shape) - 1):
            rotated = MultiPolygon(polygons=(Polygon(outer=_ring(*_rotated(shape, k))),))
            assert [contains(rotated, _pt(x, y)) for x, y in SAMPLES] == expected

    @pytest.mark.parametrize("shape", [SQUARE, L_SHAPE])
    def test_invariant_under_winding_reversal(self, shape):
        base = MultiPolygon(polygons=(Polygon(outer=_ring(*shape)),))
        reversed_ = MultiPolygon(polygons=(Polygon(outer=_ring(*reversed(shape))),))
        for x, y in SAMPLES:
            assert contains(base, _pt(x, y)) == contains(reversed_, _pt(x, y))
