"""Open Data Port.

2차(대체) 오픈 데이터 제공자 인터페이스. 재활용 태그가 붙은 노드/웨이를 조회합니다.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from recicla.domain.value_objects import GeoPoint


@dataclass(frozen=True)
class OsmElementDTO:
    """오픈 데이터 요소 (node/way).

    way는 center 좌표를 사용하며, 좌표가 없으면 lat/lng가 None입니다.
    """

    id: int | str
    type: str
    lat: float | None
    lng: float | None
    tags: dict[str, Any] = field(default_factory=dict)

    @property
    def has_coordinates(self) -> bool:
        return self.lat is not None and self.lng is not None

    @property
    def name(self) -> str | None:
        return self.tags.get("name") or None

    @property
    def tagged_address(self) -> str | None:
        """addr:* 태그로 만든 주소 ("거리, 번지 - 도시")."""
        street = self.tags.get("addr:street")
        if not street:
            return None
        number = self.tags.get("addr:housenumber", "")
        city = self.tags.get("addr:city", "")
        return f"{street}, {number} - {city}".strip()


class OpenDataPort(ABC):
    """오픈 데이터 포트."""

    @abstractmethod
    async def find_recycling_amenities(
        self, center: GeoPoint, radius_m: int
    ) -> list[OsmElementDTO]:
        """반경 내 재활용 시설 요소를 조회합니다."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """리소스 정리."""
        ...
