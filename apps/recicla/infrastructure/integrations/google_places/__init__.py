from recicla.infrastructure.integrations.google_places.google_places_client import (
    GooglePlacesHttpClient,
)

__all__ = ["GooglePlacesHttpClient"]
