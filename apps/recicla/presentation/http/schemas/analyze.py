"""Analyze HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from recicla.domain.value_objects import ClassificationResult


class AnalyzeRequest(BaseModel):
    """이미지 분석 요청."""

    model_config = ConfigDict(populate_by_name=True)

    image_data: str | None = Field(None, alias="imageData")


class AnalyzeResponse(BaseModel):
    """분류 결과 응답 (camelCase)."""

    model_config = ConfigDict(populate_by_name=True)

    label: str
    is_recyclable: bool = Field(alias="isRecyclable")
    material: str
    category: str
    disposal_info: str = Field(alias="disposalInfo")
    confidence: int
    recycling_code: str | None = Field(None, alias="recyclingCode")

    @classmethod
    def from_result(cls, result: ClassificationResult) -> AnalyzeResponse:
        return cls(
            label=result.label,
            is_recyclable=result.is_recyclable,
            material=result.material,
            category=result.category.value,
            disposal_info=result.disposal_info,
            confidence=result.confidence,
            recycling_code=result.recycling_code,
        )
