"""Reverse Geocoder Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recicla.domain.value_objects import GeoPoint


@dataclass(frozen=True)
class ReverseGeocodeDTO:
    """역지오코딩 결과 (구조화된 주소 구성요소)."""

    address: dict[str, str] = field(default_factory=dict)
    display_name: str | None = None


class ReverseGeocoderPort(ABC):
    """역지오코딩 포트."""

    @abstractmethod
    async def reverse(self, point: GeoPoint, address_details: bool = True) -> ReverseGeocodeDTO | None:
        """좌표 → 주소 구성요소. 결과가 없으면 None."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """리소스 정리."""
        ...
