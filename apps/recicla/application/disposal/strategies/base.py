"""Disposal Strategy 베이스."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recicla.application.disposal.dto import DisposalLocationDTO
    from recicla.domain.value_objects import GeoPoint


class DisposalStrategy(ABC):
    """배출 장소 제공 전략.

    빈 리스트는 "결과 없음"을 뜻하며, 다음 전략으로 넘어갑니다.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """전략 식별자 (로깅용)."""
        ...

    @abstractmethod
    async def find(self, point: GeoPoint, material: str) -> list[DisposalLocationDTO]:
        """배출 장소 후보를 찾습니다."""
        ...
