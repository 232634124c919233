"""Frame Decoder Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from recicla.domain.value_objects import Frame


class FrameDecoderPort(ABC):
    """인코딩된 이미지(JPEG/PNG 등)를 Frame으로 디코딩."""

    @abstractmethod
    def decode(self, payload: bytes) -> Frame:
        """이미지 바이트를 디코딩합니다.

        Raises:
            InvalidImageError: 디코딩 실패
        """
        ...
