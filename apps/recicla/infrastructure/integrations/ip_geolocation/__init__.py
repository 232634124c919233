from recicla.infrastructure.integrations.ip_geolocation.ip_api_client import IpApiGeolocator

__all__ = ["IpApiGeolocator"]
