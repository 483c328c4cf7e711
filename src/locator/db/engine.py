"""Engine and session lifecycle for the database-backed region store."""

from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from locator.core.config import StoreConfig
from locator.db.base import Base


class DatabaseManager:
    """Owns the async engine that ``PostgresRegionRepository`` writes through.

    One manager is created per store. The seeding script calls
    :meth:`create_schema` before loading boundaries; tests point it at
    ``sqlite+aiosqlite:///:memory:``, which skips the connection pool options.
    """

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 5,
    ) -> None:
        options: dict[str, Any] = {"echo": echo}
        if not database_url.startswith("sqlite"):
            options["pool_size"] = pool_size
            options["pool_pre_ping"] = True
        self._url = database_url
        self._engine: AsyncEngine = create_async_engine(database_url, **options)
        # Regions are read back after commit, so keep loaded attributes.
        self._sessions: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self._engine,
            expire_on_commit=False,
        )

    @classmethod
    def from_config(cls, config: StoreConfig) -> DatabaseManager:
        return cls(config.database_url, echo=config.echo)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def url(self) -> str:
        return self._url

    def session(self) -> AsyncSession:
        return self._sessions()

    async def create_schema(self) -> None:
        """Create the regions table and its indexes if they are missing."""
        import locator.db.models  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self) -> None:
        await self._engine.dispose()
