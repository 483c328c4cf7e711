"""Database layer for the locator, SQLAlchemy 2.0 async."""

from __future__ import annotations

from locator.db.base import Base
from locator.db.engine import DatabaseManager

__all__ = ["Base", "DatabaseManager"]
