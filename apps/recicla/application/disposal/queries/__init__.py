"""Disposal Queries."""

from recicla.application.disposal.queries.find_disposal_locations import (
    FindDisposalLocationsQuery,
)
from recicla.application.disposal.queries.locate_user import LocateUserQuery

__all__ = ["FindDisposalLocationsQuery", "LocateUserQuery"]
