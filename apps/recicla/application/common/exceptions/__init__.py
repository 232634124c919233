"""Application Exceptions."""

from recicla.application.common.exceptions.base import ApplicationError
from recicla.application.common.exceptions.validation import (
    ImageMissingError,
    InvalidFacingModeError,
    InvalidImageError,
    MissingCoordinatesError,
)

__all__ = [
    "ApplicationError",
    "ImageMissingError",
    "InvalidFacingModeError",
    "InvalidImageError",
    "MissingCoordinatesError",
]
