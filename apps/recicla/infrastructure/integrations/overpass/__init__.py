from recicla.infrastructure.integrations.overpass.overpass_client import OverpassHttpClient

__all__ = ["OverpassHttpClient"]
