"""Protocol definition for region storage.

Mirrors the public methods of the in-memory RegionStore exactly, so both
the sync (in-memory) and async (database) implementations satisfy the same
interface.
"""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from locator.geometry.models import Coordinate
from locator.regions.models import Region


@runtime_checkable
class RegionRepository(Protocol):
    """Protocol for region storage and containment queries."""

    def insert(self, region: Region) -> str: ...

    def insert_batch(self, regions: Iterable[Region]) -> list[str]: ...

    def find_containing(self, point: Coordinate) -> Region | None: ...

    def list_all(self) -> list[Region]: ...

    @property
    def count(self) -> int: ...
