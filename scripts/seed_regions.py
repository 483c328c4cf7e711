#!/usr/bin/env python3
"""Seed region boundaries from the declared flat-file sources.

Usage:
    # Seed every source in config/sources.yml into the configured store:
    python3 scripts/seed_regions.py

    # Seed selected sources from a different declarations file:
    python3 scripts/seed_regions.py --sources config/sources.yml chicago_illinois

    # Point at a different data directory:
    python3 scripts/seed_regions.py --data-root /srv/locator/data

The store is chosen by LOCATOR_STORE_PROVIDER (``postgres`` for a durable
load; ``memory`` only validates that the files ingest cleanly). Each source
is committed all-or-nothing.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from locator.core.config import Settings
from locator.core.errors import LocatorError
from locator.ingest.sources import load_sources, seed_sources
from locator.repositories import create_region_store
from locator.repositories.postgres.regions import PostgresRegionRepository

logger = logging.getLogger("seed_regions")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed region boundaries from flat files.")
    parser.add_argument("keys", nargs="*", help="Source keys to seed (default: all).")
    parser.add_argument("--sources", help="Path to the source declarations YAML file.")
    parser.add_argument("--data-root", help="Directory that source paths are relative to.")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace, settings: Settings) -> int:
    sources = load_sources(args.sources or settings.ingest.sources_path)
    if args.keys:
        unknown = set(args.keys) - {s.key for s in sources}
        if unknown:
            logger.error("Unknown source keys: %s", ", ".join(sorted(unknown)))
            return 2
        sources = [s for s in sources if s.key in args.keys]

    store = create_region_store(settings.store)
    db = store.db if isinstance(store, PostgresRegionRepository) else None
    if db is not None:
        await db.create_schema()

    try:
        counts = await seed_sources(store, sources, args.data_root or settings.ingest.data_root)
    except LocatorError as exc:
        logger.error("Seeding failed: %s", exc)
        return 1
    finally:
        if db is not None:
            await db.close()

    for key, count in counts.items():
        logger.info("%s: %d regions", key, count)
    return 0


def main(argv: list[str] | None = None) -> int:
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(run(parse_args(argv), settings))


if __name__ == "__main__":
    sys.exit(main())
