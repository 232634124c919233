"""Place Naming Service.

역지오코딩 주소 구성요소로 이름 없는 장소의 표시명을 만듭니다.
"""

from __future__ import annotations

from typing import Mapping

POINT_LABEL = "Ponto de Reciclagem"
UNKNOWN_LOCALITY = "sua região"

# 우선순위: 도로 → 동네 → 구역 → 도시
NAME_COMPONENT_PRIORITY: tuple[tuple[str, ...], ...] = (
    ("road", "street"),
    ("neighbourhood", "suburb"),
    ("quarter", "district"),
    ("city", "town", "municipality"),
)
LOCALITY_COMPONENTS: tuple[str, ...] = ("city", "town", "municipality")


class PlaceNamingService:
    """장소 표시명 규칙."""

    @staticmethod
    def _first_present(address: Mapping[str, str], keys: tuple[str, ...]) -> str | None:
        for key in keys:
            value = address.get(key)
            if value:
                return value
        return None

    @classmethod
    def name_from_address(cls, address: Mapping[str, str] | None) -> str:
        """주소 구성요소로 "Ponto de Reciclagem - {부분}" 이름을 만듭니다."""
        if address:
            for keys in NAME_COMPONENT_PRIORITY:
                part = cls._first_present(address, keys)
                if part:
                    return f"{POINT_LABEL} - {part}"
        return POINT_LABEL

    @classmethod
    def locality_from_address(cls, address: Mapping[str, str] | None) -> str:
        """도시명. 없으면 일반 표현."""
        if address:
            locality = cls._first_present(address, LOCALITY_COMPONENTS)
            if locality:
                return locality
        return UNKNOWN_LOCALITY
