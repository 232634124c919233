"""Frame Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Frame:
    """카메라에서 가져온 단일 프레임.

    Attributes:
        data: 픽셀 버퍼 (OpenCV 어댑터에서는 BGR numpy 배열)
        width: 가로 픽셀 수
        height: 세로 픽셀 수
    """

    data: Any
    width: int
    height: int

    @property
    def is_empty(self) -> bool:
        """아직 프레임이 준비되지 않았는지 (크기가 0)."""
        return self.width <= 0 or self.height <= 0

    @classmethod
    def empty(cls) -> Frame:
        return cls(data=None, width=0, height=0)
