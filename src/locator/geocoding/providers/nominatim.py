"""Geocoder for Nominatim-compatible search APIs."""

from __future__ import annotations

import logging

import httpx

from locator.core.config import GeocoderConfig
from locator.geocoding.client import Geocoder
from locator.geometry.models import Coordinate

logger = logging.getLogger(__name__)


class NominatimGeocoder(Geocoder):
    """Talks to an OpenStreetMap Nominatim ``/search`` endpoint."""

    def __init__(self, config: GeocoderConfig) -> None:
        super().__init__(config)
        self._http = httpx.AsyncClient(
            base_url=config.base_url,
            timeout=httpx.Timeout(config.timeout_seconds),
            headers={"User-Agent": config.user_agent},
        )

    async def geocode(self, address: str) -> Coordinate | None:
        resp = await self._http.get(
            "/search",
            params={"q": address, "format": "jsonv2", "limit": 1},
        )
        resp.raise_for_status()
        results = resp.json()
        if not results:
            logger.info("No geocoding result for %r", address)
            return None

        first = results[0]
        return Coordinate(latitude=float(first["lat"]), longitude=float(first["lon"]))

    async def close(self) -> None:
        await self._http.aclose()
