"""Classification Ports."""

from recicla.application.classify.ports.camera_device import CameraDevicePort, CameraStreamPort
from recicla.application.classify.ports.classifier import ClassifierPort
from recicla.application.classify.ports.frame_decoder import FrameDecoderPort

__all__ = ["CameraDevicePort", "CameraStreamPort", "ClassifierPort", "FrameDecoderPort"]
