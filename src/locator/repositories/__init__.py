"""Repository layer for the region store.

Provides a resolve() helper that transparently handles both sync
(in-memory) and async (database) store returns, and the store factory.
"""

from __future__ import annotations

import inspect
from typing import Awaitable, TypeVar

from locator.core.config import StoreConfig

T = TypeVar("T")


async def resolve(value: T | Awaitable[T]) -> T:
    """Await a value if it is awaitable, otherwise return it directly.

    This allows callers to use any store uniformly:
        region = await resolve(store.find_containing(point))

    The in-memory store returns plain values; the database repository
    returns coroutines.
    """
    if inspect.isawaitable(value):
        return await value  # type: ignore[return-value]
    return value  # type: ignore[return-value]


def create_region_store(config: StoreConfig):
    """Factory: build the region store selected by config.provider.

    ``memory`` returns a RegionStore; ``postgres`` returns a
    PostgresRegionRepository over a new DatabaseManager. The caller owns
    schema creation and engine disposal for the database store.
    """
    provider = config.provider.lower()
    if provider == "memory":
        from locator.regions.store import RegionStore

        return RegionStore()
    if provider == "postgres":
        from locator.db.engine import DatabaseManager
        from locator.repositories.postgres.regions import PostgresRegionRepository

        return PostgresRegionRepository(DatabaseManager.from_config(config))
    raise ValueError(
        f"Unknown region store provider {config.provider!r}. Available: memory, postgres"
    )
