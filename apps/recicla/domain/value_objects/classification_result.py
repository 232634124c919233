"""Classification Result Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from recicla.domain.enums import MaterialCategory
from recicla.domain.value_objects.recycling_guidance import RecyclingGuidance


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """틱 한 번의 분류 결과.

    모델 예측(label, confidence)과 지식 베이스 항목을 결합한 값입니다.
    다음 틱의 결과로 즉시 대체되며 저장되지 않습니다.
    """

    label: str
    is_recyclable: bool
    material: str
    category: MaterialCategory
    disposal_info: str
    confidence: int
    recycling_code: str | None = None

    @classmethod
    def from_guidance(
        cls, label: str, guidance: RecyclingGuidance, confidence: int
    ) -> ClassificationResult:
        return cls(
            label=label,
            is_recyclable=guidance.is_recyclable,
            material=guidance.material,
            category=guidance.category,
            disposal_info=guidance.disposal_info,
            confidence=confidence,
            recycling_code=guidance.recycling_code,
        )

    @property
    def is_unidentified(self) -> bool:
        return self.category is MaterialCategory.UNIDENTIFIED

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (API 응답용)."""
        data: dict[str, Any] = {
            "label": self.label,
            "isRecyclable": self.is_recyclable,
            "material": self.material,
            "category": self.category.value,
            "disposalInfo": self.disposal_info,
            "confidence": self.confidence,
        }
        if self.recycling_code:
            data["recyclingCode"] = self.recycling_code
        return data
