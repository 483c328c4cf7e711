"""Canonical geometry value types and point-in-polygon containment.

All types are immutable. Textual encodings put longitude first (x) and
latitude second (y); the models always name the axes explicitly.

Containment uses the odd/even ray-casting rule with exact double
comparisons. A point lying on any ring edge (outer or hole) is treated as
outside that polygon, so shared edges between member polygons are excluded
from the multipolygon as well.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Coordinate(BaseModel):
    """A latitude/longitude pair in degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class Envelope(BaseModel):
    """Axis-aligned bounding box, boundary inclusive."""

    model_config = ConfigDict(frozen=True)

    min_longitude: float
    min_latitude: float
    max_longitude: float
    max_latitude: float

    def contains(self, point: Coordinate) -> bool:
        return (
            self.min_longitude <= point.longitude <= self.max_longitude
            and self.min_latitude <= point.latitude <= self.max_latitude
        )

    @classmethod
    def of(cls, coordinates: list[Coordinate] | tuple[Coordinate, ...]) -> Envelope:
        longitudes = [c.longitude for c in coordinates]
        latitudes = [c.latitude for c in coordinates]
        return cls(
            min_longitude=min(longitudes),
            min_latitude=min(latitudes),
            max_longitude=max(longitudes),
            max_latitude=max(latitudes),
        )


class Ring(BaseModel):
    """A closed loop of at least four coordinates (first equals last)."""

    model_config = ConfigDict(frozen=True)

    coordinates: tuple[Coordinate, ...]

    @field_validator("coordinates")
    @classmethod
    def _check_closed(cls, value: tuple[Coordinate, ...]) -> tuple[Coordinate, ...]:
        if len(value) < 4:
            raise ValueError(f"A ring needs at least 4 coordinates, got {len(value)}")
        if value[0] != value[-1]:
            raise ValueError("A ring must start and end at the same coordinate")
        return value

    def edges(self):
        """Yield consecutive (start, end) coordinate pairs."""
        coords = self.coordinates
        for i in range(len(coords) - 1):
            yield coords[i], coords[i + 1]

    def on_boundary(self, point: Coordinate) -> bool:
        return any(_on_segment(point, a, b) for a, b in self.edges())

    def encloses(self, point: Coordinate) -> bool:
        """Odd/even crossing test. Boundary points are not handled here."""
        x, y = point.longitude, point.latitude
        inside = False
        for a, b in self.edges():
            xi, yi = a.longitude, a.latitude
            xj, yj = b.longitude, b.latitude
            if (yi > y) != (yj > y):
                crossing = (xj - xi) * (y - yi) / (yj - yi) + xi
                if x < crossing:
                    inside = not inside
        return inside


class Polygon(BaseModel):
    """An outer ring with zero or more holes."""

    model_config = ConfigDict(frozen=True)

    outer: Ring
    holes: tuple[Ring, ...] = ()

    def contains(self, point: Coordinate) -> bool:
        rings = (self.outer, *self.holes)
        if any(ring.on_boundary(point) for ring in rings):
            return False
        if not self.outer.encloses(point):
            return False
        return not any(hole.encloses(point) for hole in self.holes)


class MultiPolygon(BaseModel):
    """A non-empty collection of polygons treated as one shape."""

    model_config = ConfigDict(frozen=True)

    polygons: tuple[Polygon, ...]

    @field_validator("polygons")
    @classmethod
    def _check_non_empty(cls, value: tuple[Polygon, ...]) -> tuple[Polygon, ...]:
        if not value:
            raise ValueError("A multipolygon needs at least one polygon")
        return value

    def contains(self, point: Coordinate) -> bool:
        return contains(self, point)

    def envelope(self) -> Envelope:
        return Envelope.of([c for p in self.polygons for c in p.outer.coordinates])


def contains(multipolygon: MultiPolygon, point: Coordinate) -> bool:
    """Return True if *point* lies strictly inside any member polygon."""
    return any(polygon.contains(point) for polygon in multipolygon.polygons)


def _on_segment(point: Coordinate, a: Coordinate, b: Coordinate) -> bool:
    x, y = point.longitude, point.latitude
    x1, y1 = a.longitude, a.latitude
    x2, y2 = b.longitude, b.latitude
    cross = (x2 - x1) * (y - y1) - (y2 - y1) * (x - x1)
    if cross != 0:
        return False
    return min(x1, x2) <= x <= max(x1, x2) and min(y1, y2) <= y <= max(y1, y2)
