"""Domain Services."""

from recicla.domain.services.distance import format_distance, haversine_km

__all__ = ["format_distance", "haversine_km"]
