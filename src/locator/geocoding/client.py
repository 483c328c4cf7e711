"""Abstract geocoder interface and factory function."""

from __future__ import annotations

import abc

from locator.core.config import GeocoderConfig
from locator.geometry.models import Coordinate


class Geocoder(abc.ABC):
    """Abstract base class for geocoding providers.

    ``geocode`` returns ``None`` when the address cannot be located. Transport
    and server failures propagate to the caller; no retries happen here.
    """

    def __init__(self, config: GeocoderConfig) -> None:
        self.config = config

    @abc.abstractmethod
    async def geocode(self, address: str) -> Coordinate | None:
        """Resolve free-text *address* to a coordinate."""

    async def close(self) -> None:
        """Clean up resources. Override if the provider holds connections."""


def create_geocoder(config: GeocoderConfig) -> Geocoder:
    """Factory: select and instantiate a geocoder based on config.provider."""

    from locator.geocoding.providers import PROVIDER_REGISTRY

    provider = config.provider.lower()
    if provider not in PROVIDER_REGISTRY:
        available = ", ".join(sorted(PROVIDER_REGISTRY))
        raise ValueError(
            f"Unknown geocoder provider {config.provider!r}. "
            f"Available: {available}"
        )

    cls = PROVIDER_REGISTRY[provider]
    return cls(config)
