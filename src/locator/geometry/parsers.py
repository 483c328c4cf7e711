"""Geometry decoders and encoders for boundary source formats.

Every parser exposes one capability, ``parse(raw) -> MultiPolygon``, so the
ingestion pipeline never needs to know which encoding a source uses.
Decoding is done by shapely; the result is copied into the immutable
models in :mod:`locator.geometry.models`, which own containment.
"""

from __future__ import annotations

import json
import re
from typing import Any, Protocol, runtime_checkable

from pydantic import ValidationError
from shapely import wkt as shapely_wkt
from shapely.errors import ShapelyError
from shapely.geometry import mapping, shape
from shapely.geometry import MultiPolygon as ShapelyMultiPolygon
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry

from locator.core.errors import GeometryParseError
from locator.geometry.models import Coordinate, MultiPolygon, Polygon, Ring


@runtime_checkable
class GeometryParser(Protocol):
    """Protocol for decoding raw text into a multipolygon."""

    def parse(self, raw: str) -> MultiPolygon: ...


_SRID_RE = re.compile(r"^\s*SRID=\d+\s*;", re.IGNORECASE)


class WKTParser:
    """Parses well-known-text MULTIPOLYGON (or POLYGON) strings."""

    format = "wkt"

    def parse(self, raw: str) -> MultiPolygon:
        if not raw or not raw.strip():
            raise GeometryParseError("Geometry text is empty")
        text = _SRID_RE.sub("", raw, count=1).strip()
        try:
            geometry = shapely_wkt.loads(text)
        except (ShapelyError, ValueError) as exc:
            raise GeometryParseError(f"Invalid WKT: {exc}") from exc
        return _from_shapely(geometry)


class GeoJSONParser:
    """Parses GeoJSON MultiPolygon/Polygon geometries (optionally in a Feature).

    Rings left open in the source are closed by the decoder.
    """

    format = "geojson"

    def parse(self, raw: str) -> MultiPolygon:
        try:
            data = json.loads(raw)
        except (TypeError, json.JSONDecodeError) as exc:
            raise GeometryParseError(f"Invalid GeoJSON: {exc}") from exc
        if not isinstance(data, dict):
            raise GeometryParseError("GeoJSON geometry must be an object")

        if data.get("type") == "Feature":
            data = data.get("geometry")
            if not isinstance(data, dict):
                raise GeometryParseError("GeoJSON feature has no geometry")

        try:
            geometry = shape(data)
        except (ShapelyError, ValueError, TypeError, KeyError, IndexError, AttributeError) as exc:
            raise GeometryParseError(f"Invalid GeoJSON geometry: {exc}") from exc
        return _from_shapely(geometry)


def to_wkt(multipolygon: MultiPolygon) -> str:
    """Serialize a multipolygon to well-known text (x = longitude)."""
    return _to_shapely(multipolygon).wkt


def to_geojson(multipolygon: MultiPolygon) -> dict[str, Any]:
    """Serialize a multipolygon to a GeoJSON geometry object."""
    return mapping(_to_shapely(multipolygon))


def _from_shapely(geometry: BaseGeometry) -> MultiPolygon:
    """Copy a shapely (Multi)Polygon into a validated MultiPolygon."""
    if geometry.geom_type == "Polygon":
        members = [geometry]
    elif geometry.geom_type == "MultiPolygon":
        members = list(geometry.geoms)
    else:
        raise GeometryParseError(f"Unsupported geometry type {geometry.geom_type!r}")
    if geometry.is_empty:
        raise GeometryParseError(f"Empty {geometry.geom_type} is not a valid region boundary")
    if geometry.has_z:
        raise GeometryParseError("Coordinates must have exactly two ordinates")

    try:
        return MultiPolygon(
            polygons=tuple(
                Polygon(
                    outer=_ring(member.exterior.coords),
                    holes=tuple(_ring(hole.coords) for hole in member.interiors),
                )
                for member in members
            )
        )
    except ValidationError as exc:
        messages = "; ".join(err["msg"] for err in exc.errors())
        raise GeometryParseError(f"Invalid geometry: {messages}") from exc


def _ring(coords) -> Ring:
    return Ring(
        coordinates=tuple(Coordinate(longitude=x, latitude=y) for x, y in coords)
    )


def _to_shapely(multipolygon: MultiPolygon) -> ShapelyMultiPolygon:
    def positions(ring: Ring) -> list[tuple[float, float]]:
        return [(c.longitude, c.latitude) for c in ring.coordinates]

    return ShapelyMultiPolygon([
        ShapelyPolygon(positions(p.outer), [positions(h) for h in p.holes])
        for p in multipolygon.polygons
    ])


PARSER_REGISTRY: dict[str, type[GeometryParser]] = {
    "wkt": WKTParser,
    "geojson": GeoJSONParser,
}


def create_parser(geometry_format: str) -> GeometryParser:
    """Factory: instantiate the parser registered for *geometry_format*."""
    key = geometry_format.lower()
    if key not in PARSER_REGISTRY:
        available = ", ".join(sorted(PARSER_REGISTRY))
        raise ValueError(
            f"Unknown geometry format {geometry_format!r}. "
            f"Available: {available}"
        )
    return PARSER_REGISTRY[key]()
