"""Places Search Strategy (1차 제공자)."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from recicla.application.disposal.dto import DisposalLocationDTO
from recicla.application.disposal.strategies.base import DisposalStrategy
from recicla.domain.services import haversine_km
from recicla.domain.value_objects import GeoPoint

if TYPE_CHECKING:
    from recicla.application.disposal.ports import PlaceDTO, PlacesSearchPort

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_M = 10000
DEFAULT_MAX_RESULTS = 10
ADDRESS_UNAVAILABLE = "Endereço não disponível"
PHONE_UNAVAILABLE = "Não disponível"
HOURS_UNAVAILABLE = "Horário não disponível"


class PlacesSearchStrategy(DisposalStrategy):
    """텍스트 검색 + 상세 조회 보강.

    상세 조회 실패는 치명적이지 않으며 부분 정보로 진행합니다.
    """

    def __init__(
        self,
        places_client: "PlacesSearchPort",
        radius_m: int = DEFAULT_RADIUS_M,
        max_results: int = DEFAULT_MAX_RESULTS,
    ) -> None:
        self._places = places_client
        self._radius_m = radius_m
        self._max_results = max_results

    @property
    def name(self) -> str:
        return "places_search"

    @staticmethod
    def build_query(material: str) -> str:
        return f"pontos de coleta {material} reciclagem"

    async def find(self, point: GeoPoint, material: str) -> list[DisposalLocationDTO]:
        places = await self._places.text_search(
            self.build_query(material), center=point, radius_m=self._radius_m
        )
        if not places:
            return []

        selected = places[: self._max_results]
        locations = list(await asyncio.gather(*(self._to_location(point, p) for p in selected)))
        locations.sort(key=lambda loc: loc.distance_km)
        return locations

    async def _to_location(self, origin: GeoPoint, place: "PlaceDTO") -> DisposalLocationDTO:
        coordinates = GeoPoint(lat=place.lat, lng=place.lng)

        phone = website = hours = None
        try:
            details = await self._places.place_details(place.place_id)
            if details is not None:
                phone = details.phone
                website = details.website
                hours = details.hours
        except Exception as e:
            logger.warning(
                "Place details enrichment failed",
                extra={"place_id": place.place_id, "error": str(e)},
            )

        return DisposalLocationDTO(
            id=place.place_id,
            name=place.name,
            address=place.formatted_address or place.vicinity or ADDRESS_UNAVAILABLE,
            coordinates=coordinates,
            distance_km=haversine_km(origin, coordinates),
            phone=phone or PHONE_UNAVAILABLE,
            website=website,
            hours=hours or HOURS_UNAVAILABLE,
            rating=place.rating,
            types=list(place.types),
        )
