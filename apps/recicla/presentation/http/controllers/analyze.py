"""Analyze Controller.

단일 이미지 분석 엔드포인트 (POST /api/analyze).
"""

from __future__ import annotations

from fastapi import APIRouter, Body

from recicla.presentation.http.schemas import AnalyzeRequest, AnalyzeResponse
from recicla.setup.dependencies import AnalyzeImageCommandDep

router = APIRouter(tags=["analyze"])


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    response_model_exclude_none=True,
    summary="Classify a single image",
)
async def analyze(
    command: AnalyzeImageCommandDep,
    payload: AnalyzeRequest | None = Body(None),
) -> AnalyzeResponse:
    """base64 이미지(또는 data URL)를 분류하고 배출 안내를 반환합니다."""
    image_data = payload.image_data if payload else None
    result = await command.execute(image_data)
    return AnalyzeResponse.from_result(result)
