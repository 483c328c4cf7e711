"""Flat-file ingestion of region boundaries."""

from locator.ingest.pipeline import ColumnMap, IngestOptions, RegionIngester
from locator.ingest.sources import DataSource, load_sources, seed_sources

__all__ = [
    "ColumnMap",
    "DataSource",
    "IngestOptions",
    "RegionIngester",
    "load_sources",
    "seed_sources",
]
