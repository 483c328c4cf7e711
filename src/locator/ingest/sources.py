"""Data source declarations for seeding the region store.

Each source names one flat file together with the constants needed to read
it: which columns hold the name and geometry, the geometry encoding, and
the city/state shared by every record. Sources are declared in YAML.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from locator.geometry.parsers import create_parser
from locator.ingest.pipeline import ColumnMap, IngestOptions, RegionIngester
from locator.repositories.protocols import RegionRepository

logger = logging.getLogger(__name__)

# Default path to the data source declarations
_DEFAULT_SOURCES_PATH = Path(__file__).resolve().parents[3] / "config" / "sources.yml"


class DataSource(BaseModel):
    """One flat file of region boundaries."""

    key: str
    path: str
    city: str
    state: str
    name_column: int = Field(default=0, ge=0)
    geometry_column: int = Field(default=1, ge=0)
    geometry_format: str = "wkt"
    has_header_row: bool = True
    use_title_case: bool = False
    encoding: str = "utf-8"

    @property
    def column_map(self) -> ColumnMap:
        return ColumnMap(name=self.name_column, geometry=self.geometry_column)

    @property
    def options(self) -> IngestOptions:
        return IngestOptions(
            skip_header_row=self.has_header_row,
            title_case=self.use_title_case,
            encoding=self.encoding,
        )

    def resolve_path(self, data_root: str | Path | None = None) -> Path:
        path = Path(self.path)
        if data_root is not None and not path.is_absolute():
            return Path(data_root) / path
        return path


def load_sources(config_path: str | Path | None = None) -> list[DataSource]:
    """Load source declarations from YAML, in file order."""
    path = Path(config_path) if config_path else _DEFAULT_SOURCES_PATH
    with open(path) as fh:
        config: dict[str, Any] = yaml.safe_load(fh) or {}

    return [
        DataSource(key=key, **data)
        for key, data in (config.get("sources") or {}).items()
    ]


async def seed_sources(
    store: RegionRepository,
    sources: list[DataSource],
    data_root: str | Path | None = None,
) -> dict[str, int]:
    """Ingest each source in order; returns region counts keyed by source.

    Every source is its own all-or-nothing run. The first failing source
    stops seeding; sources ingested before it stay committed.
    """
    counts: dict[str, int] = {}
    for source in sources:
        ingester = RegionIngester(store, create_parser(source.geometry_format))
        logger.info("Seeding %s from %s", source.key, source.path)
        counts[source.key] = await ingester.ingest(
            source.resolve_path(data_root),
            source.column_map,
            source.city,
            source.state,
            source.options,
        )
    return counts
