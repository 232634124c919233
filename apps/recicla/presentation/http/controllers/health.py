"""Health Check Controller."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from recicla.setup.config import get_settings
from recicla.setup.dependencies import ClassifierDep

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """서비스 헬스 체크."""
    settings = get_settings()
    return {"status": "ok", "service": settings.service_name, "version": settings.service_version}


@router.get("/ready")
async def ready(classifier: ClassifierDep) -> JSONResponse:
    """서비스 준비 상태 체크 (분류 모델 로드 여부)."""
    if not classifier.is_ready:
        return JSONResponse(status_code=503, content={"status": "loading", "modelReady": False})
    return JSONResponse(status_code=200, content={"status": "ready", "modelReady": True})
