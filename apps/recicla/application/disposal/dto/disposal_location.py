"""Disposal Location DTO."""

from __future__ import annotations

from dataclasses import dataclass, field

from recicla.domain.services import format_distance
from recicla.domain.value_objects import GeoPoint


@dataclass
class DisposalLocationDTO:
    """배출 장소 후보.

    조회할 때마다 다시 계산되며 캐시하지 않습니다.
    """

    id: str
    name: str
    address: str
    coordinates: GeoPoint
    distance_km: float
    phone: str | None = None
    website: str | None = None
    hours: str | None = None
    rating: float | None = None
    types: list[str] = field(default_factory=list)

    @property
    def distance_text(self) -> str:
        return format_distance(self.distance_km)
