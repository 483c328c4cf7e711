"""In-memory region store with copy-on-write batches."""

from __future__ import annotations

import logging
import threading
from typing import Iterable, NamedTuple

from locator.geometry.models import Coordinate, Envelope
from locator.regions.models import Region

logger = logging.getLogger(__name__)


class _Entry(NamedTuple):
    envelope: Envelope
    region: Region


class RegionStore:
    """In-memory region collection ordered by insertion.

    The active entry tuple is never mutated: writers build a new tuple and
    swap it in under a lock, so a reader sees either none or all of a batch.
    Each entry keeps the region's envelope, which is checked before the full
    ray cast.
    """

    def __init__(self) -> None:
        self._entries: tuple[_Entry, ...] = ()
        self._write_lock = threading.Lock()

    def insert(self, region: Region) -> str:
        return self.insert_batch([region])[0]

    def insert_batch(self, regions: Iterable[Region]) -> list[str]:
        """Commit *regions* atomically and return their ids in order."""
        new_entries = tuple(_Entry(r.geometry.envelope(), r) for r in regions)
        with self._write_lock:
            self._entries = self._entries + new_entries
        logger.info("Committed batch of %d regions", len(new_entries))
        return [e.region.id for e in new_entries]

    def find_containing(self, point: Coordinate) -> Region | None:
        """Return the first-inserted region whose geometry contains *point*."""
        for entry in self._entries:
            if entry.envelope.contains(point) and entry.region.geometry.contains(point):
                return entry.region
        return None

    def list_all(self) -> list[Region]:
        return [e.region for e in self._entries]

    @property
    def count(self) -> int:
        return len(self._entries)
