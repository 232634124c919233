"""Open Data Strategy (2차 제공자).

이름 없는 요소는 역지오코딩으로 표시명을 만듭니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from recicla.application.disposal.dto import DisposalLocationDTO
from recicla.application.disposal.services import PlaceNamingService
from recicla.application.disposal.strategies.base import DisposalStrategy
from recicla.application.disposal.strategies.places_search import (
    ADDRESS_UNAVAILABLE,
    DEFAULT_MAX_RESULTS,
    DEFAULT_RADIUS_M,
    HOURS_UNAVAILABLE,
    PHONE_UNAVAILABLE,
)
from recicla.domain.services import haversine_km
from recicla.domain.value_objects import GeoPoint

if TYPE_CHECKING:
    from recicla.application.disposal.ports import (
        OpenDataPort,
        OsmElementDTO,
        ReverseGeocoderPort,
    )

logger = logging.getLogger(__name__)


class OpenDataStrategy(DisposalStrategy):
    """오픈 데이터 재활용 시설 조회."""

    def __init__(
        self,
        open_data_client: "OpenDataPort",
        reverse_geocoder: "ReverseGeocoderPort",
        radius_m: int = DEFAULT_RADIUS_M,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> None:
        self._open_data = open_data_client
        self._geocoder = reverse_geocoder
        self._radius_m = radius_m
        self._max_results = max_results

    @property
    def name(self) -> str:
        return "open_data"

    async def find(self, point: GeoPoint, material: str) -> list[DisposalLocationDTO]:
        elements = await self._open_data.find_recycling_amenities(point, radius_m=self._radius_m)
        if not elements:
            return []

        selected = elements[: self._max_results]
        built = await asyncio.gather(*(self._to_location(point, e) for e in selected))
        locations = [loc for loc in built if loc is not None]
        locations.sort(key=lambda loc: loc.distance_km)
        return locations

    async def _to_location(
        self, origin: GeoPoint, element: "OsmElementDTO"
    ) -> DisposalLocationDTO | None:
        if not element.has_coordinates:
            return None
        coordinates = GeoPoint(lat=element.lat, lng=element.lng)

        name = element.name
        address = element.tagged_address
        if not name:
            name, display_name = await self._synthesize_name(coordinates)
            if not address:
                address = display_name

        return DisposalLocationDTO(
            id=f"osm_{element.id}",
            name=name,
            address=address or ADDRESS_UNAVAILABLE,
            coordinates=coordinates,
            distance_km=haversine_km(origin, coordinates),
            phone=element.tags.get("phone") or PHONE_UNAVAILABLE,
            website=element.tags.get("website"),
            hours=element.tags.get("opening_hours") or HOURS_UNAVAILABLE,
        )

    async def _synthesize_name(self, coordinates: GeoPoint) -> tuple[str, str | None]:
        try:
            result = await self._geocoder.reverse(coordinates, address_details=True)
        except Exception as e:
            logger.warning(
                "Reverse geocoding for element name failed",
                extra={"lat": coordinates.lat, "lng": coordinates.lng, "error": str(e)},
            )
            return PlaceNamingService.name_from_address(None), None

        if result is None:
            return PlaceNamingService.name_from_address(None), None
        return PlaceNamingService.name_from_address(result.address), result.display_name
