"""Domain Entities."""

from recicla.domain.entities.camera_session import CameraSession

__all__ = ["CameraSession"]
