"""Disposal Services (순수 로직)."""

from recicla.application.disposal.services.place_naming import PlaceNamingService

__all__ = ["PlaceNamingService"]
