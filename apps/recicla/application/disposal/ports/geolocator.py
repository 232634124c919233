"""Geolocator Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recicla.domain.value_objects import GeoPoint


@dataclass(frozen=True)
class LocateOptions:
    """위치 획득 옵션.

    Attributes:
        high_accuracy: 고정밀 요청 여부
        timeout: 타임아웃 (초)
        maximum_age: 허용되는 캐시 위치의 최대 나이 (초, 0이면 캐시 미사용)
    """

    high_accuracy: bool = True
    timeout: float = 10.0
    maximum_age: float = 0.0


class GeolocatorPort(ABC):
    """사용자 위치 획득 포트."""

    @abstractmethod
    async def locate(self, client_ip: str | None, options: LocateOptions) -> GeoPoint:
        """사용자 위치를 반환합니다.

        Raises:
            LocationUnavailableError: 권한 거부/위치 불가/타임아웃
        """
        ...

    async def close(self) -> None:
        """리소스 정리 (optional)."""
        pass
