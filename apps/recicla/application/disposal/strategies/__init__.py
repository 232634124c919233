"""Disposal Provider Strategies (우선순위 순)."""

from recicla.application.disposal.strategies.base import DisposalStrategy
from recicla.application.disposal.strategies.generic_suggestion import GenericSuggestionStrategy
from recicla.application.disposal.strategies.open_data import OpenDataStrategy
from recicla.application.disposal.strategies.places_search import PlacesSearchStrategy

__all__ = [
    "DisposalStrategy",
    "GenericSuggestionStrategy",
    "OpenDataStrategy",
    "PlacesSearchStrategy",
]
