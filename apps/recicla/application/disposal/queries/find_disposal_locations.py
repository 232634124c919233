"""Find Disposal Locations Query.

배출 장소 조회 Query(지휘자)입니다. 제공자 전략을 우선순위대로 시도하고
처음으로 비어 있지 않은 결과를 반환합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Sequence

from recicla.application.common.exceptions import MissingCoordinatesError
from recicla.domain.value_objects import GeoPoint

if TYPE_CHECKING:
    from recicla.application.disposal.dto import DisposalLocationDTO
    from recicla.application.disposal.strategies import DisposalStrategy

logger = logging.getLogger(__name__)

DEFAULT_MATERIAL = "reciclagem"


class FindDisposalLocationsQuery:
    """배출 장소 조회 Query.

    Workflow:
        1. 좌표 검증 (누락 시에만 호출자 에러)
        2. 전략 순회: 장소 검색 → 오픈 데이터 → 일반 안내
        3. 전략 실패(네트워크/파싱 오류)는 빈 결과로 취급하고 다음 전략으로
        4. 거리 오름차순 정렬
    """

    def __init__(
        self,
        strategies: Sequence["DisposalStrategy"],
        default_material: str = DEFAULT_MATERIAL,
    ) -> None:
        self._strategies = list(strategies)
        self._default_material = default_material

    @property
    def strategy_names(self) -> list[str]:
        return [s.name for s in self._strategies]

    async def execute(
        self,
        lat: float | None,
        lng: float | None,
        material: str | None = None,
    ) -> list["DisposalLocationDTO"]:
        """배출 장소를 조회합니다.

        Raises:
            MissingCoordinatesError: 좌표 누락
        """
        if lat is None or lng is None:
            raise MissingCoordinatesError()

        point = GeoPoint(lat=lat, lng=lng)
        material = (material or "").strip() or self._default_material

        for strategy in self._strategies:
            try:
                locations = await strategy.find(point, material)
            except Exception as e:
                logger.warning(
                    "Disposal provider failed, falling back",
                    extra={"strategy": strategy.name, "error": str(e)},
                )
                continue

            if locations:
                locations = sorted(locations, key=lambda loc: loc.distance_km)
                logger.info(
                    "Disposal locations resolved",
                    extra={
                        "strategy": strategy.name,
                        "material": material,
                        "results_count": len(locations),
                    },
                )
                return locations

            logger.info("Disposal provider returned no results", extra={"strategy": strategy.name})

        return []
