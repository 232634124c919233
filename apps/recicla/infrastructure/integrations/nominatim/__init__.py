from recicla.infrastructure.integrations.nominatim.nominatim_client import NominatimHttpClient

__all__ = ["NominatimHttpClient"]
