"""PostgreSQL region repository."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from sqlalchemy import func, select

from locator.db.engine import DatabaseManager
from locator.db.models import RegionRow
from locator.geometry.models import Coordinate
from locator.geometry.parsers import WKTParser, to_wkt
from locator.regions.models import Region

logger = logging.getLogger(__name__)


class PostgresRegionRepository:
    """Database-backed region storage.

    Geometry is stored as WKT next to its envelope. Containment filters
    candidates by envelope in SQL, ordered by insertion sequence, and runs
    the exact ray cast in Python on each candidate.
    """

    def __init__(self, db: DatabaseManager) -> None:
        self._db = db
        self._parser = WKTParser()

    @property
    def db(self) -> DatabaseManager:
        return self._db

    async def insert(self, region: Region) -> str:
        ids = await self.insert_batch([region])
        return ids[0]

    async def insert_batch(self, regions: Iterable[Region]) -> list[str]:
        rows = [self._region_to_row(r) for r in regions]
        async with self._db.session() as db:
            db.add_all(rows)
            await db.commit()
        logger.info("Committed batch of %d regions", len(rows))
        return [row.id for row in rows]

    async def find_containing(self, point: Coordinate) -> Region | None:
        stmt = (
            select(RegionRow)
            .where(
                RegionRow.min_longitude <= point.longitude,
                RegionRow.max_longitude >= point.longitude,
                RegionRow.min_latitude <= point.latitude,
                RegionRow.max_latitude >= point.latitude,
            )
            .order_by(RegionRow.seq)
        )
        async with self._db.session() as db:
            result = await db.execute(stmt)
            for row in result.scalars():
                region = self._row_to_region(row)
                if region.geometry.contains(point):
                    return region
        return None

    async def list_all(self) -> list[Region]:
        async with self._db.session() as db:
            result = await db.execute(select(RegionRow).order_by(RegionRow.seq))
            return [self._row_to_region(r) for r in result.scalars().all()]

    @property
    def count(self) -> Any:
        async def _inner():
            async with self._db.session() as db:
                result = await db.execute(select(func.count()).select_from(RegionRow))
                return result.scalar_one()

        return _inner()

    @staticmethod
    def _region_to_row(region: Region) -> RegionRow:
        envelope = region.geometry.envelope()
        return RegionRow(
            id=region.id,
            name=region.name,
            city=region.city,
            state=region.state,
            geometry_wkt=to_wkt(region.geometry),
            min_longitude=envelope.min_longitude,
            min_latitude=envelope.min_latitude,
            max_longitude=envelope.max_longitude,
            max_latitude=envelope.max_latitude,
        )

    def _row_to_region(self, row: RegionRow) -> Region:
        return Region(
            id=row.id,
            name=row.name,
            city=row.city,
            state=row.state,
            geometry=self._parser.parse(row.geometry_wkt),
        )
