"""Neighborhood Locator: resolve coordinates and addresses to named regions."""

__version__ = "0.1.0"
