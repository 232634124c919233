"""Disposal Location Application Layer."""

from recicla.application.disposal.dto import DisposalLocationDTO
from recicla.application.disposal.queries import FindDisposalLocationsQuery, LocateUserQuery
from recicla.application.disposal.strategies import (
    DisposalStrategy,
    GenericSuggestionStrategy,
    OpenDataStrategy,
    PlacesSearchStrategy,
)

__all__ = [
    "DisposalLocationDTO",
    "DisposalStrategy",
    "FindDisposalLocationsQuery",
    "GenericSuggestionStrategy",
    "LocateUserQuery",
    "OpenDataStrategy",
    "PlacesSearchStrategy",
]
