"""Provider registry for geocoding backends."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from locator.geocoding.client import Geocoder

from locator.geocoding.providers.mock import MockGeocoder
from locator.geocoding.providers.nominatim import NominatimGeocoder

PROVIDER_REGISTRY: dict[str, type[Geocoder]] = {
    "mock": MockGeocoder,
    "nominatim": NominatimGeocoder,
}

__all__ = ["PROVIDER_REGISTRY", "MockGeocoder", "NominatimGeocoder"]
