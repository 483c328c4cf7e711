"""FastAPI application for the neighborhood locator.

Exposes the address and coordinate resolution surface as JSON endpoints.
Page rendering and result transport (flash messages etc.) belong to the
client.
"""

from __future__ import annotations

from fastapi import FastAPI
from pydantic import BaseModel

from locator import __version__
from locator.core.config import Settings
from locator.geocoding.client import Geocoder, create_geocoder
from locator.repositories import create_region_store
from locator.repositories.protocols import RegionRepository
from locator.resolution.service import ResolutionService
from locator.web.region_router import router as region_router


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str = __version__


def create_app(
    settings: Settings | None = None,
    store: RegionRepository | None = None,
    geocoder: Geocoder | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Uses the factory pattern so tests can create isolated app instances
    with pre-loaded stores and fixture geocoders.

    Args:
        settings: Application settings. Defaults to Settings().
        store: Optional pre-built region store.
        geocoder: Optional pre-built geocoder.

    Returns:
        A configured FastAPI instance.
    """
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="Neighborhood Locator",
        description="Resolve addresses and coordinates to named regions",
        version=__version__,
    )

    if store is None:
        store = create_region_store(settings.store)

    if geocoder is None:
        geocoder = create_geocoder(settings.geocoder)

    app.state.settings = settings
    app.state.region_store = store
    app.state.geocoder = geocoder
    app.state.resolution_service = ResolutionService(
        store=store,
        geocoder=geocoder,
        messages=settings.messages,
    )

    app.include_router(region_router)

    @app.get("/api/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", service="neighborhood-locator")

    return app
