"""FastAPI router for region resolution and listing endpoints."""

from __future__ import annotations

from typing import Any

import httpx
from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from locator.geometry.models import Coordinate
from locator.regions.models import Region
from locator.repositories import resolve
from locator.resolution.service import ResolutionService, SubmissionResult

router = APIRouter()


class AddressRequest(BaseModel):
    """Request body for address submission."""

    address: str = Field(min_length=1)


class PointRequest(BaseModel):
    """Request body for coordinate resolution."""

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class RegionSummary(BaseModel):
    """Region fields exposed to clients (geometry omitted)."""

    id: str
    name: str
    city: str
    state: str

    @classmethod
    def from_region(cls, region: Region) -> RegionSummary:
        return cls(id=region.id, name=region.name, city=region.city, state=region.state)


def _service(request: Request) -> ResolutionService:
    service = getattr(request.app.state, "resolution_service", None)
    if service is None:
        raise HTTPException(status_code=503, detail="Resolution service not available")
    return service


@router.post("/api/resolve", response_model=SubmissionResult)
async def submit_address(body: AddressRequest, request: Request) -> SubmissionResult:
    """Resolve a free-text address to the region containing it."""
    service = _service(request)
    try:
        return await service.submit_address(body.address)
    except httpx.HTTPError as exc:
        raise HTTPException(status_code=502, detail=f"Geocoding failed: {exc}")


@router.post("/api/resolve/point")
async def resolve_point(body: PointRequest, request: Request) -> dict[str, Any]:
    """Resolve a coordinate to the region containing it."""
    service = _service(request)
    result = await service.resolve(
        Coordinate(latitude=body.latitude, longitude=body.longitude)
    )
    region = RegionSummary.from_region(result.region).model_dump() if result.region else None
    return {"status": result.status.value, "region": region}


@router.get("/api/regions", response_model=list[RegionSummary])
async def list_regions(request: Request) -> list[RegionSummary]:
    """List stored regions in insertion order."""
    store = getattr(request.app.state, "region_store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Region store not available")
    regions = await resolve(store.list_all())
    return [RegionSummary.from_region(r) for r in regions]
