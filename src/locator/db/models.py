"""SQLAlchemy ORM models for persistent tables."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from locator.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RegionRow(Base):
    """A stored region.

    ``seq`` records insertion order and breaks ties between overlapping
    regions. The envelope columns let the containment query discard
    regions in SQL before the exact test.
    """

    __tablename__ = "regions"

    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str] = mapped_column(String(64), unique=True)
    name: Mapped[str] = mapped_column(String(255))
    city: Mapped[str] = mapped_column(String(255))
    state: Mapped[str] = mapped_column(String(64))
    geometry_wkt: Mapped[str] = mapped_column(Text)
    min_longitude: Mapped[float] = mapped_column(Float)
    min_latitude: Mapped[float] = mapped_column(Float)
    max_longitude: Mapped[float] = mapped_column(Float)
    max_latitude: Mapped[float] = mapped_column(Float)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)

    __table_args__ = (
        Index("ix_regions_envelope", "min_longitude", "max_longitude", "min_latitude", "max_latitude"),
        Index("ix_regions_city_state", "city", "state"),
    )
