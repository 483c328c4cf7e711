"""Mock geocoder with fixture addresses for development/testing."""

from __future__ import annotations

from locator.core.config import GeocoderConfig
from locator.geocoding.client import Geocoder
from locator.geometry.models import Coordinate


class MockGeocoder(Geocoder):
    """Looks addresses up in a fixed, case-insensitive table."""

    def __init__(
        self,
        config: GeocoderConfig | None = None,
        addresses: dict[str, Coordinate] | None = None,
    ) -> None:
        super().__init__(config or GeocoderConfig(provider="mock"))
        self._addresses: dict[str, Coordinate] = {}
        if addresses is None:
            self._load_fixtures()
        else:
            for address, coordinate in addresses.items():
                self.add(address, coordinate)

    def _load_fixtures(self) -> None:
        fixtures = {
            "233 S Wacker Dr, Chicago, IL 60606": Coordinate(latitude=41.8789, longitude=-87.6359),
            "1060 W Addison St, Chicago, IL 60613": Coordinate(latitude=41.9484, longitude=-87.6553),
            "5801 S Ellis Ave, Chicago, IL 60637": Coordinate(latitude=41.7886, longitude=-87.5987),
            "1600 Pennsylvania Ave NW, Washington, DC 20500": Coordinate(
                latitude=38.8977, longitude=-77.0365
            ),
        }
        for address, coordinate in fixtures.items():
            self.add(address, coordinate)

    def add(self, address: str, coordinate: Coordinate) -> None:
        self._addresses[address.strip().lower()] = coordinate

    async def geocode(self, address: str) -> Coordinate | None:
        return self._addresses.get(address.strip().lower())
