"""Geocoding collaborators that turn addresses into coordinates."""

from locator.geocoding.client import Geocoder, create_geocoder

__all__ = ["Geocoder", "create_geocoder"]
