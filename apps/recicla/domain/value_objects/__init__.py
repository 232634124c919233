"""Recicla Domain Value Objects."""

from recicla.domain.value_objects.classification_result import ClassificationResult
from recicla.domain.value_objects.frame import Frame
from recicla.domain.value_objects.geo_point import GeoPoint
from recicla.domain.value_objects.prediction import Prediction
from recicla.domain.value_objects.recycling_guidance import RecyclingGuidance

__all__ = ["ClassificationResult", "Frame", "GeoPoint", "Prediction", "RecyclingGuidance"]
