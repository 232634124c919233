"""Domain Enums."""

from recicla.domain.enums.camera_state import CameraState
from recicla.domain.enums.facing_mode import FacingMode
from recicla.domain.enums.material_category import MaterialCategory

__all__ = ["CameraState", "FacingMode", "MaterialCategory"]
