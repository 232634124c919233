"""Classification Commands."""

from recicla.application.classify.commands.analyze_image import AnalyzeImageCommand
from recicla.application.classify.commands.camera_lifecycle import (
    CameraLifecycleManager,
    TorchToggleResult,
)
from recicla.application.classify.commands.classification_loop import ClassificationLoop

__all__ = [
    "AnalyzeImageCommand",
    "CameraLifecycleManager",
    "ClassificationLoop",
    "TorchToggleResult",
]
