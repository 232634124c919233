"""도메인 예외."""

from recicla.domain.exceptions.base import DomainError
from recicla.domain.exceptions.camera import (
    CameraUnavailableError,
    ModelNotReadyError,
    TorchUnsupportedError,
)
from recicla.domain.exceptions.location import LocationUnavailableError, LocationUnavailableReason

__all__ = [
    "CameraUnavailableError",
    "DomainError",
    "LocationUnavailableError",
    "LocationUnavailableReason",
    "ModelNotReadyError",
    "TorchUnsupportedError",
]
