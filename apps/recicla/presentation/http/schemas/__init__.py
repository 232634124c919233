"""HTTP Schemas."""

from recicla.presentation.http.schemas.analyze import AnalyzeRequest, AnalyzeResponse
from recicla.presentation.http.schemas.camera import (
    CameraStartRequest,
    CameraStatusResponse,
    FlashResponse,
)
from recicla.presentation.http.schemas.disposal import (
    CoordinatesSchema,
    DisposalLocationsResponse,
    PlaceEntry,
    UserLocationResponse,
)

__all__ = [
    "AnalyzeRequest",
    "AnalyzeResponse",
    "CameraStartRequest",
    "CameraStatusResponse",
    "CoordinatesSchema",
    "DisposalLocationsResponse",
    "FlashResponse",
    "PlaceEntry",
    "UserLocationResponse",
]
