"""Recicla Domain Layer."""

from recicla.domain.entities import CameraSession
from recicla.domain.enums import CameraState, FacingMode, MaterialCategory
from recicla.domain.value_objects import ClassificationResult, Frame, GeoPoint, Prediction

__all__ = [
    "CameraSession",
    "CameraState",
    "ClassificationResult",
    "FacingMode",
    "Frame",
    "GeoPoint",
    "MaterialCategory",
    "Prediction",
]
