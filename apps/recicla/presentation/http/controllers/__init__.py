"""HTTP Controllers."""

from recicla.presentation.http.controllers.analyze import router as analyze_router
from recicla.presentation.http.controllers.camera import router as camera_router
from recicla.presentation.http.controllers.disposal import location_router
from recicla.presentation.http.controllers.disposal import router as disposal_router
from recicla.presentation.http.controllers.health import router as health_router

__all__ = [
    "analyze_router",
    "camera_router",
    "disposal_router",
    "health_router",
    "location_router",
]
