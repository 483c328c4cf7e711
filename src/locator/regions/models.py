"""Region data models."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator

from locator.geometry.models import MultiPolygon


class Region(BaseModel):
    """A named area (e.g. a neighborhood) with its boundary."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    name: str
    city: str
    state: str
    geometry: MultiPolygon

    @field_validator("name", "city", "state")
    @classmethod
    def _non_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value

    @property
    def label(self) -> str:
        """Display form, e.g. ``"Uptown, Chicago, IL"``."""
        return f"{self.name}, {self.city}, {self.state}"
