"""Resolution of coordinates and addresses to stored regions."""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Literal

from pydantic import BaseModel

from locator.core.config import MessagesConfig
from locator.geocoding.client import Geocoder
from locator.geometry.models import Coordinate
from locator.regions.models import Region
from locator.repositories import resolve
from locator.repositories.protocols import RegionRepository

logger = logging.getLogger(__name__)


class ResolutionStatus(StrEnum):
    """Outcome of a resolution attempt."""

    FOUND = "found"
    NO_REGION_CONTAINS = "no_region_contains"
    BAD_ADDRESS = "bad_address"


class ResolutionResult(BaseModel):
    """Typed outcome; ``region`` is set only when ``status`` is FOUND."""

    status: ResolutionStatus
    region: Region | None = None
    point: Coordinate | None = None

    @property
    def found(self) -> bool:
        return self.status == ResolutionStatus.FOUND


class SubmissionResult(BaseModel):
    """User-facing result of submitting an address."""

    status: Literal["success", "error"]
    message: str


class ResolutionService:
    """Answers "which region contains this point/address?".

    Holds no state beyond its collaborators. Store and geocoder errors are
    not caught here.
    """

    def __init__(
        self,
        store: RegionRepository,
        geocoder: Geocoder | None = None,
        messages: MessagesConfig | None = None,
    ) -> None:
        self._store = store
        self._geocoder = geocoder
        self._messages = messages or MessagesConfig()

    async def resolve(self, point: Coordinate) -> ResolutionResult:
        region = await resolve(self._store.find_containing(point))
        if region is None:
            return ResolutionResult(status=ResolutionStatus.NO_REGION_CONTAINS, point=point)
        return ResolutionResult(status=ResolutionStatus.FOUND, region=region, point=point)

    async def resolve_address(self, address: str) -> ResolutionResult:
        if self._geocoder is None:
            raise RuntimeError("No geocoder configured for address resolution")

        point = await self._geocoder.geocode(address)
        if point is None:
            logger.info("Address could not be geocoded: %r", address)
            return ResolutionResult(status=ResolutionStatus.BAD_ADDRESS)
        return await self.resolve(point)

    async def submit_address(self, address: str) -> SubmissionResult:
        result = await self.resolve_address(address)
        if result.status == ResolutionStatus.BAD_ADDRESS:
            return SubmissionResult(status="error", message=self._messages.bad_address)
        if result.status == ResolutionStatus.NO_REGION_CONTAINS:
            return SubmissionResult(status="error", message=self._messages.no_results)
        return SubmissionResult(status="success", message=self.format_region(result.region))

    def format_region(self, region: Region) -> str:
        """Format the success message, e.g. ``That address is in Loop, Chicago, IL.``"""
        return f"{self._messages.region_prefix}{region.label}."
