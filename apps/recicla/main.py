"""Recicla API - FastAPI application entry point.

분산 트레이싱 통합:
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (Places/Overpass/Nominatim/분류기 호출)
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from recicla.presentation.http.controllers import (
    analyze_router,
    camera_router,
    disposal_router,
    health_router,
    location_router,
)
from recicla.presentation.http.errors.handlers import register_exception_handlers
from recicla.setup.config import get_settings
from recicla.setup.dependencies import close_clients, get_classifier
from recicla.setup.logging import setup_logging
from recicla.setup.tracing import (
    instrument_fastapi,
    instrument_httpx,
    setup_tracing,
    shutdown_tracing,
)

logger = logging.getLogger(__name__)
settings = get_settings()


async def load_classifier() -> None:
    """분류 모델을 백그라운드에서 로드합니다. 실패해도 서비스는 계속 동작합니다."""
    classifier = get_classifier()
    try:
        await classifier.load()
    except Exception:
        logger.error("Classifier model load failed", exc_info=True)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    setup_logging(settings.log_level)
    logger.info(f"Starting {settings.service_name}")

    # OpenTelemetry 설정
    if settings.otel_enabled:
        setup_tracing(
            settings.service_name,
            settings.service_version,
            settings.otel_exporter_otlp_endpoint,
        )
        instrument_httpx()

    load_task = asyncio.create_task(load_classifier(), name="classifier-load")

    yield

    logger.info(f"Shutting down {settings.service_name}")
    if not load_task.done():
        load_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await load_task
    await close_clients()
    shutdown_tracing()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title="Recicla API",
        description="Recyclable material recognition and disposal location lookup",
        version=settings.service_version,
        docs_url="/api/docs",
        openapi_url="/api/openapi.json",
        redoc_url="/api/redoc",
        lifespan=lifespan,
    )

    # CORS 미들웨어 추가
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # OpenTelemetry FastAPI instrumentation
    if settings.otel_enabled:
        instrument_fastapi(app)

    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(analyze_router, prefix="/api")
    app.include_router(disposal_router, prefix="/api")
    app.include_router(location_router, prefix="/api/v1")
    app.include_router(camera_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "recicla.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "development",
    )
