"""Places Search Port.

1차 장소 검색 제공자 (텍스트 검색 + 상세 조회) 인터페이스.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recicla.domain.value_objects import GeoPoint


@dataclass(frozen=True)
class PlaceDTO:
    """텍스트 검색 결과 장소."""

    place_id: str
    name: str
    lat: float
    lng: float
    formatted_address: str | None = None
    vicinity: str | None = None
    rating: float | None = None
    types: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PlaceDetailsDTO:
    """장소 상세 정보."""

    phone: str | None = None
    website: str | None = None
    weekday_text: tuple[str, ...] = field(default_factory=tuple)

    @property
    def hours(self) -> str | None:
        if not self.weekday_text:
            return None
        return ", ".join(self.weekday_text)


class PlacesSearchPort(ABC):
    """장소 검색 포트."""

    @abstractmethod
    async def text_search(self, query: str, center: GeoPoint, radius_m: int) -> list[PlaceDTO]:
        """텍스트 검색.

        Raises:
            httpx.HTTPError 등: 네트워크/응답 오류 (호출자가 흡수)
        """
        ...

    @abstractmethod
    async def place_details(self, place_id: str) -> PlaceDetailsDTO | None:
        """장소 상세 조회 (전화번호, 웹사이트, 영업시간)."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """리소스 정리."""
        ...
