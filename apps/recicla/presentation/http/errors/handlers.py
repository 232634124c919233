"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from recicla.application.common.exceptions.base import ApplicationError
from recicla.application.common.exceptions.validation import (
    ImageMissingError,
    InvalidFacingModeError,
    InvalidImageError,
    MissingCoordinatesError,
)
from recicla.domain.exceptions.base import DomainError
from recicla.domain.exceptions.camera import CameraUnavailableError, ModelNotReadyError
from recicla.domain.exceptions.location import (
    LocationUnavailableError,
    LocationUnavailableReason,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(MissingCoordinatesError)
    async def missing_coordinates_handler(request: Request, exc: MissingCoordinatesError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "MISSING_COORDINATES"},
        )

    @app.exception_handler(ImageMissingError)
    async def image_missing_handler(request: Request, exc: ImageMissingError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "IMAGE_MISSING"},
        )

    @app.exception_handler(InvalidImageError)
    async def invalid_image_handler(request: Request, exc: InvalidImageError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_IMAGE"},
        )

    @app.exception_handler(InvalidFacingModeError)
    async def invalid_facing_handler(request: Request, exc: InvalidFacingModeError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "INVALID_FACING_MODE"},
        )

    @app.exception_handler(ModelNotReadyError)
    async def model_not_ready_handler(request: Request, exc: ModelNotReadyError):
        return JSONResponse(
            status_code=503,
            content={"detail": exc.message, "code": "MODEL_NOT_READY"},
        )

    @app.exception_handler(CameraUnavailableError)
    async def camera_unavailable_handler(request: Request, exc: CameraUnavailableError):
        return JSONResponse(
            status_code=503,
            content={"detail": exc.message, "code": "CAMERA_UNAVAILABLE"},
        )

    @app.exception_handler(LocationUnavailableError)
    async def location_unavailable_handler(request: Request, exc: LocationUnavailableError):
        if exc.reason is LocationUnavailableReason.PERMISSION_DENIED:
            status_code, code = 403, "LOCATION_PERMISSION_DENIED"
        else:
            status_code, code = 503, "LOCATION_UNAVAILABLE"
        return JSONResponse(
            status_code=status_code,
            content={
                "detail": exc.message,
                "code": code,
                "reason": exc.reason.value,
                "retryable": exc.retryable,
            },
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "DOMAIN_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled error",
            extra={"path": request.url.path, "error": str(exc)},
            exc_info=exc,
        )
        return JSONResponse(
            status_code=500,
            content={"detail": INTERNAL_ERROR_MESSAGE, "code": "INTERNAL_ERROR"},
        )
