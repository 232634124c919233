"""Disposal Location Ports."""

from recicla.application.disposal.ports.geolocator import GeolocatorPort, LocateOptions
from recicla.application.disposal.ports.open_data import OpenDataPort, OsmElementDTO
from recicla.application.disposal.ports.places_search import (
    PlaceDetailsDTO,
    PlaceDTO,
    PlacesSearchPort,
)
from recicla.application.disposal.ports.reverse_geocoder import (
    ReverseGeocodeDTO,
    ReverseGeocoderPort,
)

__all__ = [
    "GeolocatorPort",
    "LocateOptions",
    "OpenDataPort",
    "OsmElementDTO",
    "PlaceDTO",
    "PlaceDetailsDTO",
    "PlacesSearchPort",
    "ReverseGeocodeDTO",
    "ReverseGeocoderPort",
]
