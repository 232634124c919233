"""Camera Lifecycle State Enum."""

from enum import Enum


class CameraState(str, Enum):
    """카메라 라이프사이클 상태.

    Idle → Starting → Active → (Switching → Active) → Stopping → Idle
    """

    IDLE = "idle"
    STARTING = "starting"
    ACTIVE = "active"
    SWITCHING = "switching"
    STOPPING = "stopping"
