"""Generic Suggestion Strategy (최종 대체).

사용자 지역명을 기반으로 일반 안내 항목 2개를 합성합니다. 항상 결과를 반환합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from recicla.application.disposal.dto import DisposalLocationDTO
from recicla.application.disposal.services import PlaceNamingService
from recicla.application.disposal.strategies.base import DisposalStrategy
from recicla.application.disposal.strategies.places_search import PHONE_UNAVAILABLE

if TYPE_CHECKING:
    from recicla.application.disposal.ports import ReverseGeocoderPort
    from recicla.domain.value_objects import GeoPoint

logger = logging.getLogger(__name__)

DEFAULT_NOMINAL_DISTANCE_KM = 5.0
COORDINATE_OFFSET = 0.01


class GenericSuggestionStrategy(DisposalStrategy):
    """시청 수거 + 재활용 센터 안내."""

    def __init__(
        self,
        reverse_geocoder: "ReverseGeocoderPort",
        nominal_distance_km: float = DEFAULT_NOMINAL_DISTANCE_KM,
    ) -> None:
        self._geocoder = reverse_geocoder
        self._nominal_distance_km = nominal_distance_km

    @property
    def name(self) -> str:
        return "generic_suggestion"

    async def find(self, point: GeoPoint, material: str) -> list[DisposalLocationDTO]:
        locality = await self._resolve_locality(point)
        return [
            DisposalLocationDTO(
                id="generic_1",
                name="Coleta Seletiva Municipal",
                address=f"Prefeitura de {locality}",
                coordinates=point,
                distance_km=0.0,
                phone="156",
                hours="Seg-Sex: 8h-17h",
            ),
            DisposalLocationDTO(
                id="generic_2",
                name="Centro de Reciclagem",
                address=f"Verifique pontos de coleta em {locality}",
                coordinates=point.offset(COORDINATE_OFFSET, COORDINATE_OFFSET),
                distance_km=self._nominal_distance_km,
                phone=PHONE_UNAVAILABLE,
                hours="Verifique horários",
            ),
        ]

    async def _resolve_locality(self, point: GeoPoint) -> str:
        try:
            result = await self._geocoder.reverse(point, address_details=True)
        except Exception as e:
            logger.warning("Locality lookup failed", extra={"error": str(e)})
            return PlaceNamingService.locality_from_address(None)
        return PlaceNamingService.locality_from_address(result.address if result else None)
