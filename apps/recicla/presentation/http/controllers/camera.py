"""Camera Controller.

실시간 분류 루프 제어 (/api/v1/camera/...).
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body

from recicla.application.classify import ClassificationLoop
from recicla.application.common.exceptions import InvalidFacingModeError
from recicla.domain.enums import FacingMode
from recicla.presentation.http.schemas import (
    CameraStartRequest,
    CameraStatusResponse,
    FlashResponse,
)
from recicla.setup.dependencies import ClassificationLoopDep

router = APIRouter(prefix="/camera", tags=["camera"])

FACING_VALUES = ["user", "environment", "front", "back"]


@router.post("/start", response_model=CameraStatusResponse, summary="Start live classification")
async def start(
    loop: ClassificationLoopDep,
    payload: CameraStartRequest | None = Body(None),
) -> CameraStatusResponse:
    """카메라를 열고 분류 루프를 시작합니다."""
    facing = _parse_facing(payload.facing if payload else "environment")
    await loop.start(facing)
    return _status(loop)


@router.post("/stop", response_model=CameraStatusResponse, summary="Stop live classification")
async def stop(loop: ClassificationLoopDep) -> CameraStatusResponse:
    await loop.stop()
    return _status(loop)


@router.post("/switch", response_model=CameraStatusResponse, summary="Switch front/back camera")
async def switch(loop: ClassificationLoopDep) -> CameraStatusResponse:
    await loop.switch_camera()
    return _status(loop)


@router.post("/flash", response_model=FlashResponse, summary="Toggle torch")
async def flash(loop: ClassificationLoopDep) -> FlashResponse:
    """토치를 토글합니다. 지원하지 않으면 ok=false와 안내 메시지를 반환합니다."""
    result = await loop.toggle_flash()
    return FlashResponse(ok=result.ok, torch_on=result.torch_on, message=result.message)


@router.get("/status", response_model=CameraStatusResponse, summary="Camera lifecycle status")
async def status(loop: ClassificationLoopDep) -> CameraStatusResponse:
    return _status(loop)


@router.get("/result", summary="Latest classification result")
async def result(loop: ClassificationLoopDep) -> dict[str, Any] | None:
    """마지막으로 발행된 분류 결과 (없으면 null)."""
    latest = loop.latest_result
    return latest.to_dict() if latest else None


def _parse_facing(raw: str) -> FacingMode:
    """facing 파라미터를 파싱합니다."""
    try:
        return FacingMode.parse(raw)
    except ValueError:
        raise InvalidFacingModeError(value=raw, allowed=FACING_VALUES)


def _status(loop: ClassificationLoop) -> CameraStatusResponse:
    camera = loop.camera
    session = camera.session
    return CameraStatusResponse(
        state=camera.state.value,
        active=camera.is_active,
        facing=session.facing.value if session else None,
        torch_on=session.torch_on if session else False,
        supports_torch=session.supports_torch if session else False,
        session_id=session.session_id if session else None,
        model_ready=loop.is_model_ready,
    )
