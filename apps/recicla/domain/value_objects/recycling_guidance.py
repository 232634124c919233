"""Recycling Guidance Value Object."""

from __future__ import annotations

from dataclasses import dataclass

from recicla.domain.enums import MaterialCategory


@dataclass(frozen=True, slots=True)
class RecyclingGuidance:
    """지식 베이스의 소재별 배출 안내 항목.

    Attributes:
        is_recyclable: 재활용 가능 여부
        material: 표시용 소재명
        category: 안내 카테고리
        disposal_info: 배출 방법 안내문
        recycling_code: 재활용 코드 (예: PET, optional)
    """

    is_recyclable: bool
    material: str
    category: MaterialCategory
    disposal_info: str
    recycling_code: str | None = None
