"""Classification Application Layer."""

from recicla.application.classify.commands import (
    AnalyzeImageCommand,
    CameraLifecycleManager,
    ClassificationLoop,
    TorchToggleResult,
)
from recicla.application.classify.services import ConfidenceGate, RecyclingKnowledgeBase

__all__ = [
    "AnalyzeImageCommand",
    "CameraLifecycleManager",
    "ClassificationLoop",
    "ConfidenceGate",
    "RecyclingKnowledgeBase",
    "TorchToggleResult",
]
